from __future__ import annotations

from enum import Enum

import httpx


class ErrorKind(str, Enum):
	REMOTE_REJECTED = "remote_rejected"
	TRANSPORT_FAILURE = "transport_failure"


class MovieClientError(Exception):
	"""Single error type raised by every failing client operation.

	Branch on ``kind``:

	- ``REMOTE_REJECTED``: the service answered with a non-2xx status.
	  ``status_code``, ``status_text`` and ``response_body`` are set.
	- ``TRANSPORT_FAILURE``: no usable answer (connection error, timeout,
	  undecodable body). ``cause`` holds the underlying exception.

	``method`` and ``url`` always describe the request that failed.
	"""

	def __init__(
		self,
		kind: ErrorKind,
		*,
		method: str,
		url: str,
		status_code: int | None = None,
		status_text: str | None = None,
		response_body: str | None = None,
		cause: BaseException | None = None,
	) -> None:
		self.kind = kind
		self.method = method
		self.url = url
		self.status_code = status_code
		self.status_text = status_text
		self.response_body = response_body
		self.cause = cause
		super().__init__(self._describe())

	@classmethod
	def remote_rejected(cls, method: str, url: str, response: httpx.Response) -> MovieClientError:
		return cls(
			ErrorKind.REMOTE_REJECTED,
			method=method,
			url=url,
			status_code=response.status_code,
			status_text=response.reason_phrase,
			response_body=response.text,
		)

	@classmethod
	def transport_failure(cls, method: str, url: str, cause: BaseException) -> MovieClientError:
		return cls(ErrorKind.TRANSPORT_FAILURE, method=method, url=url, cause=cause)

	@property
	def is_remote_rejected(self) -> bool:
		return self.kind is ErrorKind.REMOTE_REJECTED

	@property
	def is_transport_failure(self) -> bool:
		return self.kind is ErrorKind.TRANSPORT_FAILURE

	def _describe(self) -> str:
		if self.kind is ErrorKind.REMOTE_REJECTED:
			return f"{self.method} {self.url} rejected with {self.status_code} {self.status_text}"
		return f"{self.method} {self.url} failed: {self.cause!r}"
