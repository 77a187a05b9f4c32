from pathlib import Path

# ----- Set project root directory -----
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# ----- Config Files -----
CONFIG_FILES_DIR = PROJECT_ROOT / "config_files"

# JSON
JSON_DIR = CONFIG_FILES_DIR / "json"
TEST_DATA_BITTREX_PATH = JSON_DIR / "test_data_bittrex.json"

# INI
INI_DIR = CONFIG_FILES_DIR / "ini"
RUN_INI_PATH = INI_DIR / "run.ini"

# ----- Helpers directory -----
HELPERS = PROJECT_ROOT / "helpers"

# ----- Resources directory -----
RESOURCES = PROJECT_ROOT / "resources"

# Subdirectories under Resources
FUNCTIONS = RESOURCES / "functions"
SERVICES = RESOURCES / "services"
UTILS = RESOURCES / "utils"

# ----- Tests directory -----
TESTS = PROJECT_ROOT / "tests"
