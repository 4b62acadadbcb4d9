"""GNU screen configuration generation."""

from .merge import MergeState, ScreenCommands, generate_list_block, merge_screen_config, split_config

__all__ = ["MergeState", "ScreenCommands", "generate_list_block", "merge_screen_config", "split_config"]
