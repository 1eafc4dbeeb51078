"""Services for asset uploader."""
from .api_client import HTTPAPIClient, UploadError
from .files import FileStream, LocalFileSystem
from .inputs import ActionInputs, input_env_name
from .matcher import GlobMatcher
from .reporter import ActionReporter

__all__ = [
    "ActionInputs",
    "ActionReporter",
    "FileStream",
    "GlobMatcher",
    "HTTPAPIClient",
    "LocalFileSystem",
    "UploadError",
    "input_env_name",
]
