"""Unwrapping of CloudStack response envelopes into records.

Every API reply is wrapped in a single key named after the command::

    {"listaccountsresponse": {"count": 1, "account": [{...}]}}

and failures come back as::

    {"errorresponse": {"errorcode": 431, "errortext": "..."}}
"""
import json
import logging
import threading
from collections.abc import Mapping
from typing import Any, List, Optional, Tuple, Type, TypeVar, Union

from cloudstack.config.manager import ConfigurationManager
from cloudstack.config.schemas import ParserConfig
from cloudstack.domain.base.exceptions import CloudStackApiError, ResponseParseError
from cloudstack.domain.base.record import CloudStackRecord
from cloudstack.domain.job.models import AsyncCreateResponse, AsyncJob

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=CloudStackRecord)

Payload = Union[str, bytes, bytearray, Mapping]

ENVELOPE_SUFFIX = "response"


class ResponseParser:
    """
    Select and decode the records carried by a response envelope.

    Args:
        config: Parser settings; defaults apply when None
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()

    def parse_list(self, payload: Payload, record_cls: Type[R]) -> List[R]:
        """
        Decode a list response.

        Args:
            payload: Raw JSON or decoded envelope
            record_cls: Record type held by the response

        Returns:
            Records in server order; empty when the response holds none

        Raises:
            CloudStackApiError: If the envelope reports an API error
            ResponseParseError: If the envelope is malformed and
                ``strict_envelopes`` is enabled
        """
        collection = self._collection_key(record_cls)
        try:
            command, body = self._unwrap(payload)
            items = body.get(collection)
            if items is None:
                logger.debug("No '%s' in %s response", collection, command or "bare")
                return []
            if isinstance(items, Mapping):
                items = [items]
            if not isinstance(items, list) or not all(isinstance(i, Mapping) for i in items):
                raise ResponseParseError(
                    f"Expected a list of objects under '{collection}'", payload=body
                )
        except ResponseParseError:
            if self.config.strict_envelopes:
                raise
            logger.warning("Ignoring malformed %s list envelope", record_cls.__name__)
            return []

        logger.debug("Selected %d '%s' from %s response", len(items), collection, command or "bare")
        return [record_cls.from_wire(item) for item in items]

    def parse_one(self, payload: Payload, record_cls: Type[R]) -> Optional[R]:
        """
        Decode a response carrying a single record.

        The record may sit under its collection key (as an object or a list
        of one) or be the envelope body itself.

        Returns:
            The record, or None when the response is empty
        """
        command, body = self._unwrap(payload)
        item: Any = body
        collection = record_cls.wire_collection
        if collection and collection in body:
            item = body[collection]
            if isinstance(item, list):
                if len(item) > 1:
                    logger.debug("%s response has %d '%s', using the first",
                                 command, len(item), collection)
                item = item[0] if item else None
        if not item:
            return None
        if not isinstance(item, Mapping):
            raise ResponseParseError(f"Expected an object for {record_cls.__name__}", payload=body)
        return record_cls.from_wire(item)

    def parse_async_create(self, payload: Payload) -> AsyncCreateResponse:
        """Decode the id/jobid pair returned by an asynchronous create."""
        command, body = self._unwrap(payload)
        if "jobid" not in body:
            raise ResponseParseError(f"No jobid in {command or 'bare'} response", payload=body)
        return AsyncCreateResponse.from_wire(body)

    def parse_async_job(self, payload: Payload,
                        result_cls: Optional[Type[R]] = None) -> AsyncJob:
        """
        Decode a queryAsyncJobResult response.

        Args:
            payload: Raw JSON or decoded envelope
            result_cls: Record type the job produces; when given and the
                job succeeded, ``result`` holds the decoded record

        Returns:
            The job
        """
        _, body = self._unwrap(payload)
        job = AsyncJob.from_wire(body)
        if result_cls is None:
            return job
        decoded = job.result_as(result_cls)
        if decoded is None:
            return job
        return job.model_copy(update={"result": decoded})

    @staticmethod
    def _collection_key(record_cls: Type[CloudStackRecord]) -> str:
        if not record_cls.wire_collection:
            raise ValueError(f"{record_cls.__name__} is not returned in list responses")
        return record_cls.wire_collection

    @staticmethod
    def _unwrap(payload: Payload) -> Tuple[Optional[str], Mapping]:
        """Return the command name and body of an envelope, raising on API errors."""
        data = _decode(payload)
        if not isinstance(data, Mapping):
            raise ResponseParseError("Response is not a JSON object", payload=data)

        command = None
        body: Any = data
        if len(data) == 1:
            key = next(iter(data))
            if key.endswith(ENVELOPE_SUFFIX):
                command = key[: -len(ENVELOPE_SUFFIX)]
                body = data[key]
        if body is None:
            body = {}
        if not isinstance(body, Mapping):
            raise ResponseParseError(f"Body of {command} response is not an object", payload=data)

        if "errorcode" in body and "errortext" in body:
            code = body["errorcode"]
            raise CloudStackApiError(
                int(code) if str(code).lstrip("-").isdigit() else None,
                body["errortext"],
                command,
            )
        return command, body


def _decode(payload: Payload) -> Any:
    if isinstance(payload, Mapping):
        return payload
    try:
        if isinstance(payload, (bytes, bytearray)):
            payload = payload.decode("utf-8")
        return json.loads(payload)
    except (TypeError, ValueError) as e:
        raise ResponseParseError(f"Response is not valid JSON: {e}", payload=payload) from e


_default_parser: Optional[ResponseParser] = None
_default_parser_lock = threading.Lock()


def get_default_parser() -> ResponseParser:
    """Parser behind the module-level functions, configured by ConfigurationManager."""
    global _default_parser
    if _default_parser is None:
        with _default_parser_lock:
            if _default_parser is None:
                _default_parser = ResponseParser(ConfigurationManager().get_parser_config())
    return _default_parser


def reset_default_parser() -> None:
    """Drop the cached default parser so the next call reads configuration again."""
    global _default_parser
    with _default_parser_lock:
        _default_parser = None


def parse_list(payload: Payload, record_cls: Type[R]) -> List[R]:
    return get_default_parser().parse_list(payload, record_cls)


def parse_one(payload: Payload, record_cls: Type[R]) -> Optional[R]:
    return get_default_parser().parse_one(payload, record_cls)


def parse_async_create(payload: Payload) -> AsyncCreateResponse:
    return get_default_parser().parse_async_create(payload)


def parse_async_job(payload: Payload, result_cls: Optional[Type[R]] = None) -> AsyncJob:
    return get_default_parser().parse_async_job(payload, result_cls)
