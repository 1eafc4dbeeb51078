"""Upload orchestrator - resolves assets and uploads them concurrently."""
from __future__ import annotations

import asyncio
from typing import Callable, Optional

from .models import UploadInputs, UploadRequest
from .protocols import IFileMatcher, IFileSystem, IHTTPClient, IInputSource, IReporter
from .services.api_client import HTTPAPIClient
from .services.files import LocalFileSystem
from .services.matcher import GlobMatcher

NO_FILES_MESSAGE = "No files found"


class UploadOrchestrator:
    """
    Uploads every file matched by ``asset_path`` to ``upload_url``.

    Collaborators are injected so the orchestrator can run without a real
    environment, filesystem or network:

        reporter = ActionReporter()
        await UploadOrchestrator(ActionInputs(), reporter).run()
        sys.exit(reporter.exit_code)

    All uploads start together. The first failing upload is passed verbatim
    to ``reporter.set_failed``; the remaining uploads are not cancelled and
    ``run`` returns only after every upload has settled.
    """

    def __init__(
        self,
        inputs: IInputSource,
        reporter: IReporter,
        client_factory: Callable[[str], IHTTPClient] = HTTPAPIClient,
        matcher: Optional[IFileMatcher] = None,
        filesystem: Optional[IFileSystem] = None,
    ):
        self._inputs = inputs
        self._reporter = reporter
        self._client_factory = client_factory
        self._matcher = matcher or GlobMatcher()
        self._filesystem = filesystem or LocalFileSystem()

    async def run(self) -> None:
        config = UploadInputs.read(self._inputs)

        async with self._client_factory(config.token) as client:
            # Resolution errors are left to the caller.
            files = await self._matcher.glob(config.asset_path)
            if not files:
                self._reporter.set_failed(NO_FILES_MESSAGE)
                return

            self._reporter.info(f"Uploading {len(files)} files to {config.upload_url}")
            self._reporter.info("Files: " + "\n".join(files))
            tasks = [
                asyncio.ensure_future(self._upload_asset(client, path, config))
                for path in files
            ]
            try:
                await asyncio.gather(*tasks)
            except Exception as exc:
                self._reporter.set_failed(exc)
                # The client stays open until every sibling has settled.
                await asyncio.gather(*tasks, return_exceptions=True)

    async def _upload_asset(self, client: IHTTPClient, path: str, config: UploadInputs) -> None:
        self._reporter.debug(f"Uploading {path} to {config.upload_url}")
        size = await self._filesystem.size(path)
        stream = await self._filesystem.open(path)
        try:
            await client.request(
                UploadRequest.for_asset(config.upload_url, size, config.token, stream)
            )
        finally:
            await stream.aclose()
        self._reporter.debug(f"Uploaded {path} to {config.upload_url}")
