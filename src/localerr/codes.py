"""Error codes for localerr."""

CONFIG_001 = "CONFIG_001"  # Config file not found
CONFIG_002 = "CONFIG_002"  # Config file unreadable or not a YAML mapping
CONFIG_003 = "CONFIG_003"  # Config failed validation
RENDER_001 = "RENDER_001"  # No template text supplied
RENDER_002 = "RENDER_002"  # Placeholder without a matching argument
RENDER_003 = "RENDER_003"  # Jinja template error
KIND_001 = "KIND_001"  # Unknown error kind
