from upath import UPath

PROJECT_PATH = UPath(__file__).parent.parent.resolve()

CACHE_DIR = PROJECT_PATH.joinpath(".cache")
CONFIG_DIR = PROJECT_PATH.joinpath("configs")

DEFAULT_CONFIG_PATH = CONFIG_DIR.joinpath("default.yaml")
SCHEMA_SNAPSHOT_PATH = CACHE_DIR.joinpath("schema_snapshot.json")
