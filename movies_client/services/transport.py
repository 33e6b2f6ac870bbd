from __future__ import annotations

import asyncio
import concurrent.futures
import logging
import threading

import httpx

from ..settings import AppSettings, get_settings
from .request_builder import MovieRequest

logger = logging.getLogger(__name__)


class MovieServiceTransport:
	"""Async httpx client bound to the movie service, with a blocking entry point.

	The client and every request coroutine live on a private event loop in a
	daemon thread; nothing else may await on that client. ``call`` submits one
	request to the loop and blocks the calling thread until it resolves. It is
	the only place a caller suspends, so any number of threads may share one
	transport.
	"""

	def __init__(
		self,
		base_url: str,
		client: httpx.AsyncClient | None = None,
		*,
		timeout: float = 12.0,
		connect_timeout: float = 5.0,
	) -> None:
		self._base_url = base_url.rstrip("/")
		self._client = client or httpx.AsyncClient(
			base_url=self._base_url,
			timeout=httpx.Timeout(timeout, connect=connect_timeout),
		)
		self._closed = False
		self._close_lock = threading.Lock()
		self._loop = asyncio.new_event_loop()
		self._thread = threading.Thread(target=self._run_loop, name="movie-service-transport", daemon=True)
		self._thread.start()

	@classmethod
	def from_settings(cls, settings: AppSettings | None = None) -> MovieServiceTransport:
		settings = settings or get_settings()
		return cls(
			settings.MOVIES_BASE_URL,
			timeout=settings.MOVIES_TIMEOUT,
			connect_timeout=settings.MOVIES_CONNECT_TIMEOUT,
		)

	@property
	def base_url(self) -> str:
		return self._base_url

	@property
	def closed(self) -> bool:
		return self._closed

	def _run_loop(self) -> None:
		asyncio.set_event_loop(self._loop)
		self._loop.run_forever()

	async def _send(self, request: MovieRequest) -> httpx.Response:
		logger.debug("%s %s%s", request.method, self._base_url, request.url)
		return await self._client.request(request.method, request.url, json=request.json)

	def call(self, request: MovieRequest, timeout: float | None = None) -> httpx.Response:
		"""Send ``request`` and block until its response is available.

		Raises ``TimeoutError`` if ``timeout`` seconds pass first; the in-flight
		request is cancelled. Raises ``httpx.TransportError`` if the transport is
		closed while the request is in flight. Other httpx errors propagate
		unchanged.
		"""
		if self._closed:
			raise RuntimeError("MovieServiceTransport is closed")
		future = asyncio.run_coroutine_threadsafe(self._send(request), self._loop)
		try:
			return future.result(timeout)
		except concurrent.futures.TimeoutError:
			future.cancel()
			raise TimeoutError(
				f"{request.method} {request.url} did not complete within {timeout}s"
			) from None
		except concurrent.futures.CancelledError:
			raise httpx.TransportError(
				f"{request.method} {request.url} was cancelled because the transport closed"
			) from None

	async def _shutdown(self) -> None:
		# Pending requests must finish cancelling before the loop stops,
		# otherwise their callers wait forever.
		current = asyncio.current_task()
		pending = [task for task in asyncio.all_tasks() if task is not current]
		for task in pending:
			task.cancel()
		await asyncio.gather(*pending, return_exceptions=True)
		await self._client.aclose()

	def close(self) -> None:
		with self._close_lock:
			if self._closed:
				return
			self._closed = True
		try:
			asyncio.run_coroutine_threadsafe(self._shutdown(), self._loop).result()
		finally:
			self._loop.call_soon_threadsafe(self._loop.stop)
			self._thread.join()
			self._loop.close()

	def __enter__(self) -> MovieServiceTransport:
		return self

	def __exit__(self, *exc_info) -> None:
		self.close()
