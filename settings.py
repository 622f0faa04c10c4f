from config.loader import get_config_loader

# Get the config loader instance
config = get_config_loader()

# Server configuration
PORT = config.get("PORT", 8787)
LOG_LEVEL = config.get("LOG_LEVEL", "info")
BIND_ADDRESS = config.get("BIND_ADDRESS", "0.0.0.0")

# Institution configuration (set at deploy time)
INSTITUTION_NAME = config.get("INSTITUTION_NAME", "Grambling State University")
# Canvas host used for the token help link and the /api/v1/ pass-through
UPSTREAM_API_HOST = config.get("UPSTREAM_API_HOST", "grambling.instructure.com")

# Mount the /api/v1/ pass-through proxy
PASSTHROUGH_ENABLED = config.get("PASSTHROUGH_ENABLED", True)

# Debug log file written when the server runs with --debug
DEBUG_LOG_FILE = config.get("DEBUG_LOG_FILE", "bridge_debug.log")
