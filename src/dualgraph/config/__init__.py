from dualgraph.config.io import (
    clear_config_cache,
    deep_merge,
    get_global_config_path,
    get_local_config_path,
    get_merged_config,
    load_config_file,
)
from dualgraph.config.models import (
    DemoConfig,
    DualgraphConfig,
    ExportConfig,
    GraphDefaults,
)

__all__ = [
    "DemoConfig",
    "DualgraphConfig",
    "ExportConfig",
    "GraphDefaults",
    "clear_config_cache",
    "deep_merge",
    "get_global_config_path",
    "get_local_config_path",
    "get_merged_config",
    "load_config_file",
]
