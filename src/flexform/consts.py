"""Constants for FlexForm"""

# ==================== File Paths ====================
CONFIG_PATH_DEFAULT = "config.toml"
LOG_FILE_DEFAULT = "data/flexform.log"

# ==================== Settings ====================
ENV_PREFIX = "FLEXFORM_"
ENV_NESTED_DELIMITER = "__"
