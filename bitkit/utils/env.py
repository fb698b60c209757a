import os


def get_boolean_env_variable(name: str, default: bool) -> bool:
    return os.getenv(name, str(default)).lower() in ["1", "true"]


def get_string_env_variable(name: str, default: str) -> str:
    value = os.getenv(name)
    return default if value is None or value == "" else value
