"""Configuration constants for contract-pusher."""

API_BASE_URL = "https://api.tenderly.dev"
DASHBOARD_URL = "https://dashboard.tenderly.dev"

# Request timeout in seconds for API calls
REQUEST_TIMEOUT = 30

# Global (per-user) configuration lives in ~/.contract-pusher/config.yaml
GLOBAL_CONFIG_DIR_NAME = ".contract-pusher"
GLOBAL_CONFIG_FILE_NAME = "config.yaml"

# Project configuration lives next to truffle-config.js
PROJECT_CONFIG_FILE_NAME = "contract-pusher.yaml"

# Environment overrides
ENV_TOKEN = "CONTRACT_PUSHER_TOKEN"
ENV_API_URL = "CONTRACT_PUSHER_API_URL"
ENV_CONFIG_DIR = "CONTRACT_PUSHER_CONFIG_DIR"

# Truffle configuration file names, checked in this order
NEW_TRUFFLE_CONFIG_FILE = "truffle-config.js"
OLD_TRUFFLE_CONFIG_FILE = "truffle.js"
DEFAULT_BUILD_DIRECTORY = "./build/contracts"
