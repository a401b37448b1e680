"""Validation helpers for configuration dictionaries and files."""

from os.path import isfile


def validate_protocol_config(config: dict) -> None:
    """Checks an SMTP configuration dictionary.

    Args:
        config (dict): Must contain `server` (str) and `port` (int).

    Raises:
        ValueError: If a key is missing or has the wrong type.
    """
    if not isinstance(config, dict):
        raise ValueError("Protocol configuration must be a dictionary.")
    if not isinstance(config.get("server"), str) or not config["server"]:
        raise ValueError("Protocol configuration requires a 'server' string.")
    port = config.get("port")
    if not isinstance(port, int) or isinstance(port, bool) or not 0 < port < 65536:
        raise ValueError("Protocol configuration requires a valid integer 'port'.")


def validate_sender(sender: dict) -> None:
    """Checks sender credentials.

    Args:
        sender (dict): Must contain `email` and `password` strings.

    Raises:
        ValueError: If a key is missing or is not a string.
    """
    if not isinstance(sender, dict):
        raise ValueError("Sender must be a dictionary.")
    for key in ("email", "password"):
        if not isinstance(sender.get(key), str):
            raise ValueError(f"Sender requires a '{key}' string.")


def validate_path(path: str) -> None:
    if not isinstance(path, str):
        raise ValueError("Path must be a string.")
    if not isfile(path):
        raise FileNotFoundError(f"File not found: {path}")


def validate_template(file: str) -> None:
    """Checks that `file` is an existing HTML or text template."""
    validate_path(file)
    if not file.lower().endswith((".html", ".htm", ".txt", ".j2", ".jinja")):
        raise ValueError(f"Not a valid template file: {file}")
