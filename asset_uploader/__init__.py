"""
Asset uploader - upload local files to a release upload endpoint.

Usage:
    from asset_uploader import ActionInputs, ActionReporter, UploadOrchestrator

    reporter = ActionReporter()
    await UploadOrchestrator(ActionInputs(), reporter).run()
    # reporter.exit_code is 1 if any upload failed or nothing matched

Inputs are read from ``INPUT_UPLOAD_URL``, ``INPUT_ASSET_PATH`` and
``INPUT_TOKEN``. Every matched file is POSTed concurrently as
``application/octet-stream`` with ``authorization: token <token>``.
"""
from .models import UploadInputs, UploadRequest
from .orchestrator import UploadOrchestrator
from .services import (
    ActionInputs,
    ActionReporter,
    GlobMatcher,
    HTTPAPIClient,
    LocalFileSystem,
    UploadError,
)

__version__ = "0.1.0"
__all__ = [
    # Main
    "UploadOrchestrator",
    # Models
    "UploadInputs",
    "UploadRequest",
    # Services
    "ActionInputs",
    "ActionReporter",
    "GlobMatcher",
    "HTTPAPIClient",
    "LocalFileSystem",
    "UploadError",
]
