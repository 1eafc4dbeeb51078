"""Named input lookup backed by environment variables."""
import os
from typing import Mapping, Optional


def input_env_name(name: str) -> str:
    """Return the environment variable that carries input ``name``."""
    return f"INPUT_{name.replace(' ', '_').upper()}"


class ActionInputs:
    """
    Reads workflow inputs from ``INPUT_<NAME>`` variables.

    Implements IInputSource protocol. Unset inputs read as an empty string.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = os.environ if environ is None else environ

    def get(self, name: str) -> str:
        return self._environ.get(input_env_name(name), "").strip()
