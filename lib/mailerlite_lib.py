"""
MailerLite v2 Library
=====================
Client for v2 of the MailerLite REST API (https://api.mailerlite.com/api/v2).

Features:
- Manage subscriber groups and the subscribers inside them
- List subscriber segments
- Create, fill, send, cancel and delete campaigns
- Read account stats
- Every call returns a MailerLiteResult instead of raising on HTTP errors
- Debug logging with configurable levels
- Config-driven (dict, JSON file or environment) for multi-account use

USAGE:
    from mailerlite_lib import ErrorKind, load_mailerlite_lib_from_env

    mailer = load_mailerlite_lib_from_env()

    result = mailer.add_subscriber(6322190, {"email": "james.moon@example.com",
                                             "name": "James Moon"})
    if result.success:
        print(result.parsed.id)
    elif result.error == ErrorKind.NOT_FOUND:
        print("no such group")

ENV VARS:
    MAILERLITE_API_KEY    — API key from MailerLite > Integrations > Developer API
    MAILERLITE            — legacy name for the API key, read when MAILERLITE_API_KEY is unset
    MAILERLITE_BASE_URL   — override the API root (default https://api.mailerlite.com/api/v2)
    MAILERLITE_LOG_LEVEL  — override the configured log level
"""

import os
import json
import logging
import time
import requests
from enum import Enum
from typing import Dict, Any, Optional, List, Union, Callable
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from mailerlite_models import (
    CampaignContent,
    CampaignSchedule,
    CampaignStatus,
    Campaign,
    Group,
    ListOptions,
    NewCampaign,
    NewCampaignResponse,
    NewSubscriber,
    SegmentPage,
    Stats,
    Subscriber,
    SubscriberType,
)


DEFAULT_BASE_URL = "https://api.mailerlite.com/api/v2"
DEFAULT_TIMEOUT = 30


# ============================================================
# LOGGING SETUP
# ============================================================

class MailerLiteLibLogger:
    """Logger with configurable verbosity; extras are appended as JSON"""

    FORMAT = '%(asctime)s [MAILERLITE-LIB] %(levelname)s - %(message)s'
    DATEFMT = '%Y-%m-%d %H:%M:%S'

    def __init__(self, log_level: str = "INFO", log_file: Optional[str] = None):
        self.logger = logging.getLogger("mailerlite_lib")
        self.logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
        # one set of handlers per configured client; release the previous client's files
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(self.FORMAT, datefmt=self.DATEFMT))
        self.logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(self.FORMAT, datefmt=self.DATEFMT))
            self.logger.addHandler(file_handler)

    def debug(self, msg: str, extra: Optional[Dict] = None):
        if extra:
            msg = f"{msg} | {json.dumps(extra, indent=2, default=str)}"
        self.logger.debug(msg)

    def info(self, msg: str, extra: Optional[Dict] = None):
        if extra:
            msg = f"{msg} | {json.dumps(extra, default=str)}"
        self.logger.info(msg)

    def warning(self, msg: str, extra: Optional[Dict] = None):
        if extra:
            msg = f"{msg} | {json.dumps(extra, default=str)}"
        self.logger.warning(msg)

    def error(self, msg: str, extra: Optional[Dict] = None):
        if extra:
            msg = f"{msg} | {json.dumps(extra, indent=2, default=str)}"
        self.logger.error(msg)


# ============================================================
# CONFIGURATION
# ============================================================

class MailerLiteConfig:
    """Configuration container for MailerLite operations"""

    def __init__(self, config_path: Optional[str] = None, config_dict: Optional[Dict] = None):
        """
        Initialize MailerLite configuration.

        Priority: config_dict > config_path > environment variables.

        Args:
            config_path: Path to JSON config file
            config_dict: Dict with config values (takes precedence over file)
        """
        if config_dict is not None:
            self.config = dict(config_dict)
        elif config_path:
            with open(config_path, 'r') as f:
                self.config = json.load(f)
        else:
            self.config = {}

        self.api_key = (
            self.config.get('mailerlite_api_key')
            or os.getenv('MAILERLITE_API_KEY')
            or os.getenv('MAILERLITE')
        )
        if not self.api_key:
            raise ValueError(
                "mailerlite_api_key is required in config "
                "(or set MAILERLITE_API_KEY in the environment)"
            )

        self.base_url = (
            self.config.get('base_url')
            or os.getenv('MAILERLITE_BASE_URL')
            or DEFAULT_BASE_URL
        ).rstrip('/')
        self.account_name = self.config.get('account_name', 'Unknown Account')
        self.log_level = self.config.get('log_level', 'INFO')
        self.log_file = self.config.get('log_file')
        self.timeout = self.config.get('timeout', DEFAULT_TIMEOUT)

        env_log_level = os.getenv('MAILERLITE_LOG_LEVEL')
        if env_log_level:
            self.log_level = env_log_level

    def __repr__(self):
        return f"MailerLiteConfig(account={self.account_name}, log_level={self.log_level})"


# ============================================================
# RESULTS & ERRORS
# ============================================================

class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    UNPROCESSABLE_ENTITY = "unprocessable_entity"
    SERVER_ERROR = "server_error"
    NETWORK_ERROR = "network_error"
    UNKNOWN = "unknown"


STATUS_ERRORS = {
    400: ErrorKind.BAD_REQUEST,
    404: ErrorKind.NOT_FOUND,
    422: ErrorKind.UNPROCESSABLE_ENTITY,
    500: ErrorKind.SERVER_ERROR,
}


class MailerLiteDecodeError(ValueError):
    """A success response whose body is not valid JSON."""

    def __init__(self, status_code: int, raw_body: str, reason: str):
        self.status_code = status_code
        self.raw_body = raw_body
        super().__init__(f"Could not decode HTTP {status_code} body as JSON: {reason}")


class MailerLiteResult(BaseModel):
    """
    Outcome of a single API call.

    Ok results have success=True and carry the decoded JSON in `data`
    (None for 204 No Content) plus a typed view in `parsed`. Error results
    have success=False and an ErrorKind in `error`; when a response was
    received its status and raw body are preserved.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    success: bool
    data: Any = None
    parsed: Any = None
    error: Optional[ErrorKind] = None
    status_code: Optional[int] = None
    raw_body: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def invalid_argument(cls, message: str) -> "MailerLiteResult":
        return cls(success=False, error=ErrorKind.INVALID_ARGUMENT, message=message)

    def __bool__(self) -> bool:
        return self.success


def _error_message(raw_body: str) -> Optional[str]:
    """Pull the human-readable message out of MailerLite's error envelope, if any."""
    try:
        payload = json.loads(raw_body)
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if payload.get("message"):
        return str(payload["message"])
    return None


# ============================================================
# INPUT VALIDATION
# ============================================================

def _is_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _coerce(model_cls, value: Any):
    """
    Turn a model instance or a plain dict into model_cls.

    Raises:
        ValueError: value is neither, or fails validation
    """
    if isinstance(value, model_cls):
        return value
    if isinstance(value, dict):
        return model_cls.model_validate(value)
    raise ValueError(f"expected {model_cls.__name__} or dict, got {type(value).__name__}")


def _query_options(options: Any) -> Dict[str, Any]:
    if options is None:
        return {}
    return _coerce(ListOptions, options).to_query()


def _list_of(model_cls) -> Callable[[Any], List[Any]]:
    adapter = TypeAdapter(List[model_cls])
    return adapter.validate_python


# ============================================================
# MAIN LIBRARY CLASS
# ============================================================

class MailerLiteLib:
    """Main MailerLite v2 library interface"""

    def __init__(self, config: MailerLiteConfig):
        """
        Initialize MailerLite library.

        Args:
            config: MailerLiteConfig instance
        """
        self.config = config
        self.base_url = config.base_url
        self.logger = MailerLiteLibLogger(
            log_level=config.log_level,
            log_file=config.log_file
        )

        self.logger.info("MailerLiteLib initialized", {
            "account": config.account_name,
            "base_url": config.base_url,
            "log_level": config.log_level
        })

    # ========================================
    # REQUEST / RESPONSE MAPPING
    # ========================================

    def _headers(self, has_body: bool) -> Dict[str, str]:
        headers = {
            "X-MailerLite-ApiKey": self.config.api_key,
            "Accept": "application/json",
        }
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _url(self, path: str, query: Optional[Dict[str, Any]] = None) -> str:
        url = f"{self.base_url}{path}"
        if not query:
            return url
        return requests.Request("GET", url, params=query).prepare().url

    def perform(
        self,
        method: str,
        url: str,
        body: Optional[str] = None,
        operation_name: Optional[str] = None,
        parse: Optional[Callable[[Any], Any]] = None
    ) -> MailerLiteResult:
        """
        Issue one HTTP call and map the outcome to a MailerLiteResult.

        Status policy:
            200/201 -> ok with decoded JSON
            204     -> ok with no payload
            400/404/422/500 -> bad_request/not_found/unprocessable_entity/server_error
            other   -> unknown, status and body preserved verbatim
            no response -> network_error

        Args:
            method: HTTP verb (GET, POST, PUT, DELETE)
            url: Absolute URL
            body: Pre-serialized JSON text, or None
            operation_name: Label for log lines
            parse: Optional callable building a typed view of the decoded payload

        Returns:
            MailerLiteResult

        Raises:
            MailerLiteDecodeError: 200/201 body is not valid JSON
        """
        operation_name = operation_name or f"{method} {url}"

        if not isinstance(url, str) or not url:
            return MailerLiteResult.invalid_argument("url must be a non-empty string")
        if body is not None:
            if not isinstance(body, str):
                return MailerLiteResult.invalid_argument("body must be pre-serialized JSON text")
            try:
                json.loads(body)
            except ValueError as e:
                return MailerLiteResult.invalid_argument(f"body is not valid JSON: {e}")

        self.logger.debug(f"{operation_name} - Request", {"method": method, "url": url, "body": body})

        start_time = time.time()
        try:
            response = requests.request(
                method=method,
                url=url,
                headers=self._headers(body is not None),
                data=body.encode("utf-8") if body is not None else None,
                timeout=self.config.timeout
            )
        except requests.exceptions.RequestException as e:
            self.logger.error(f"{operation_name} - NETWORK ERROR", {
                "error": str(e),
                "error_type": type(e).__name__,
                "elapsed_sec": round(time.time() - start_time, 3)
            })
            return MailerLiteResult(
                success=False,
                error=ErrorKind.NETWORK_ERROR,
                message=str(e)
            )

        elapsed = round(time.time() - start_time, 3)
        status = response.status_code
        raw_body = response.text

        if status in (200, 201):
            try:
                data = json.loads(raw_body)
            except ValueError as e:
                self.logger.error(f"{operation_name} - UNDECODABLE BODY", {
                    "status": status,
                    "body": raw_body
                })
                raise MailerLiteDecodeError(status, raw_body, str(e)) from e

            self.logger.info(f"{operation_name} - SUCCESS", {"status": status, "elapsed_sec": elapsed})
            self.logger.debug(f"{operation_name} - Full response", {"response": data})
            return MailerLiteResult(
                success=True,
                data=data,
                parsed=self._parse(operation_name, parse, data),
                status_code=status
            )

        if status == 204:
            self.logger.info(f"{operation_name} - SUCCESS (no content)", {"status": status, "elapsed_sec": elapsed})
            return MailerLiteResult(success=True, status_code=status)

        error = STATUS_ERRORS.get(status, ErrorKind.UNKNOWN)
        self.logger.error(f"{operation_name} - FAILED", {
            "status": status,
            "error": error.value,
            "elapsed_sec": elapsed,
            "body": raw_body
        })
        return MailerLiteResult(
            success=False,
            error=error,
            status_code=status,
            raw_body=raw_body,
            message=_error_message(raw_body) or f"HTTP {status}"
        )

    def _parse(self, operation_name: str, parse: Optional[Callable[[Any], Any]], data: Any) -> Any:
        if parse is None or data is None:
            return None
        try:
            return parse(data)
        except ValidationError as e:
            # The raw payload stays on the result; only the typed view is missing.
            self.logger.warning(f"{operation_name} - Response did not match model", {
                "errors": e.errors(include_url=False)
            })
            return None

    def _request(
        self,
        method: str,
        path: str,
        operation_name: str,
        payload: Optional[Dict[str, Any]] = None,
        query: Optional[Dict[str, Any]] = None,
        parse: Optional[Callable[[Any], Any]] = None
    ) -> MailerLiteResult:
        body = json.dumps(payload) if payload is not None else None
        return self.perform(
            method,
            self._url(path, query),
            body=body,
            operation_name=operation_name,
            parse=parse
        )

    def _invalid(self, operation_name: str, message: str) -> MailerLiteResult:
        self.logger.error(f"{operation_name} - INVALID ARGUMENT", {"error": message})
        return MailerLiteResult.invalid_argument(message)

    # ========================================
    # GROUP OPERATIONS
    # ========================================

    def list_groups(
        self,
        options: Optional[Union[ListOptions, Dict[str, Any]]] = None
    ) -> MailerLiteResult:
        """
        List all subscriber groups.

        Args:
            options: ListOptions or dict with limit/offset

        Returns:
            MailerLiteResult; parsed is a list of Group
        """
        self.logger.info("Listing groups")

        try:
            query = _query_options(options)
        except ValueError as e:
            return self._invalid("LIST_GROUPS", str(e))

        return self._request(
            "GET", "/groups", "LIST_GROUPS",
            query=query,
            parse=_list_of(Group)
        )

    def get_group(self, group_id: int) -> MailerLiteResult:
        """Get a single group by ID."""
        operation_name = f"GET_GROUP[{group_id}]"
        if not _is_id(group_id):
            return self._invalid(operation_name, "group_id must be a non-negative integer")

        self.logger.info(f"Getting group: {group_id}")
        return self._request("GET", f"/groups/{group_id}", operation_name, parse=Group.model_validate)

    def create_group(self, name: str) -> MailerLiteResult:
        """
        Create a new subscriber group.

        Args:
            name: Group name

        Returns:
            MailerLiteResult; parsed is the new Group
        """
        operation_name = f"CREATE_GROUP[{name}]"
        if not isinstance(name, str) or not name.strip():
            return self._invalid(operation_name, "name must be a non-empty string")

        self.logger.info(f"Creating group: {name}")
        return self._request(
            "POST", "/groups", operation_name,
            payload={"name": name},
            parse=Group.model_validate
        )

    def update_group(self, group_id: int, name: str) -> MailerLiteResult:
        """Rename a group."""
        operation_name = f"UPDATE_GROUP[{group_id}]"
        if not _is_id(group_id):
            return self._invalid(operation_name, "group_id must be a non-negative integer")
        if not isinstance(name, str) or not name.strip():
            return self._invalid(operation_name, "name must be a non-empty string")

        self.logger.info(f"Updating group: {group_id}")
        return self._request(
            "PUT", f"/groups/{group_id}", operation_name,
            payload={"name": name},
            parse=Group.model_validate
        )

    def delete_group(self, group_id: int) -> MailerLiteResult:
        """Delete a group. Subscribers in it are kept."""
        operation_name = f"DELETE_GROUP[{group_id}]"
        if not _is_id(group_id):
            return self._invalid(operation_name, "group_id must be a non-negative integer")

        self.logger.info(f"Deleting group: {group_id}")
        return self._request("DELETE", f"/groups/{group_id}", operation_name)

    def add_subscriber(
        self,
        group_id: int,
        new_subscriber: Union[NewSubscriber, Dict[str, Any]]
    ) -> MailerLiteResult:
        """
        Add a new subscriber to a group.

        Args:
            group_id: MailerLite group ID
            new_subscriber: NewSubscriber or dict, e.g.
                {"email": "james.moon@example.com",
                 "name": "James Moon",
                 "fields": {"company": "Megacorp Ltd", "city": "London"},
                 "resubscribe": False,
                 "autoresponders": False,
                 "type": "unconfirmed"}

        Returns:
            MailerLiteResult; parsed is the Subscriber
        """
        operation_name = f"ADD_SUBSCRIBER[{group_id}]"
        if not _is_id(group_id):
            return self._invalid(operation_name, "group_id must be a non-negative integer")
        try:
            subscriber = _coerce(NewSubscriber, new_subscriber)
        except ValueError as e:
            return self._invalid(operation_name, str(e))

        self.logger.info(f"Adding subscriber to group {group_id}")
        self.logger.debug(f"{operation_name} - Subscriber", {"email": subscriber.email})
        return self._request(
            "POST", f"/groups/{group_id}/subscribers", operation_name,
            payload=subscriber.to_payload(),
            parse=Subscriber.model_validate
        )

    def list_group_subscribers(
        self,
        group_id: int,
        subscriber_type: Optional[Union[SubscriberType, str]] = None,
        options: Optional[Union[ListOptions, Dict[str, Any]]] = None
    ) -> MailerLiteResult:
        """
        List subscribers in a group, optionally only those of one type.

        Args:
            group_id: MailerLite group ID
            subscriber_type: active, unsubscribed, bounced, junk or unconfirmed
            options: ListOptions or dict with limit/offset

        Returns:
            MailerLiteResult; parsed is a list of Subscriber
        """
        operation_name = f"LIST_GROUP_SUBSCRIBERS[{group_id}]"
        if not _is_id(group_id):
            return self._invalid(operation_name, "group_id must be a non-negative integer")

        path = f"/groups/{group_id}/subscribers"
        try:
            if subscriber_type is not None:
                path = f"{path}/{SubscriberType(subscriber_type).value}"
            query = _query_options(options)
        except ValueError as e:
            return self._invalid(operation_name, str(e))

        self.logger.info(f"Listing subscribers of group {group_id}")
        return self._request("GET", path, operation_name, query=query, parse=_list_of(Subscriber))

    def remove_subscriber(self, group_id: int, subscriber: Union[int, str]) -> MailerLiteResult:
        """
        Remove a subscriber from a group.

        Args:
            group_id: MailerLite group ID
            subscriber: Subscriber ID or email address
        """
        by_id = _is_id(subscriber)
        operation_name = f"REMOVE_SUBSCRIBER[{group_id}/{subscriber if by_id else '<email>'}]"
        if not _is_id(group_id):
            return self._invalid(operation_name, "group_id must be a non-negative integer")
        if by_id:
            identifier = str(subscriber)
        elif isinstance(subscriber, str) and "@" in subscriber:
            identifier = quote(subscriber, safe="@")
        else:
            return self._invalid(operation_name, "subscriber must be an ID or an email address")

        self.logger.info(f"Removing subscriber from group {group_id}")
        self.logger.debug(f"{operation_name} - Subscriber", {"subscriber": subscriber})
        return self._request("DELETE", f"/groups/{group_id}/subscribers/{identifier}", operation_name)

    # ========================================
    # SEGMENT OPERATIONS
    # ========================================

    def get_segments(
        self,
        options: Optional[Union[ListOptions, Dict[str, Any]]] = None
    ) -> MailerLiteResult:
        """
        Get all account subscriber segments.

        Args:
            options: ListOptions or dict, e.g. {"limit": 100, "offset": 1, "order": "DESC"}

        Returns:
            MailerLiteResult; parsed is a SegmentPage (data + pagination meta)
        """
        try:
            query = _query_options(options)
        except ValueError as e:
            return self._invalid("GET_SEGMENTS", str(e))

        self.logger.info("Listing segments")
        return self._request("GET", "/segments", "GET_SEGMENTS", query=query, parse=SegmentPage.model_validate)

    # ========================================
    # CAMPAIGN OPERATIONS
    # ========================================

    def get_campaigns(
        self,
        status: Union[CampaignStatus, str] = CampaignStatus.SENT,
        options: Optional[Union[ListOptions, Dict[str, Any]]] = None
    ) -> MailerLiteResult:
        """
        Return campaigns in the account by status.

        Args:
            status: sent (default), outbox or draft
            options: ListOptions or dict, e.g. {"limit": 10, "offset": 0, "order": "ASC"}

        Returns:
            MailerLiteResult; parsed is a list of Campaign
        """
        try:
            status = CampaignStatus(status)
        except ValueError:
            return self._invalid("GET_CAMPAIGNS", f"invalid campaign status: {status!r}")
        operation_name = f"GET_CAMPAIGNS[{status.value}]"
        try:
            query = _query_options(options)
        except ValueError as e:
            return self._invalid(operation_name, str(e))

        self.logger.info(f"Listing {status.value} campaigns")
        return self._request(
            "GET", f"/campaigns/{status.value}", operation_name,
            query=query,
            parse=_list_of(Campaign)
        )

    def create_campaign(self, new_campaign: Union[NewCampaign, Dict[str, Any]]) -> MailerLiteResult:
        """
        Create a new campaign.

        Args:
            new_campaign: NewCampaign or dict, e.g.
                {"groups": [2984475, 3237221],
                 "subject": "A regular email campaign",
                 "type": "regular"}

        Returns:
            MailerLiteResult; parsed is a NewCampaignResponse
        """
        try:
            campaign = _coerce(NewCampaign, new_campaign)
        except ValueError as e:
            return self._invalid("CREATE_CAMPAIGN", str(e))

        self.logger.info(f"Creating campaign: {campaign.subject}")
        return self._request(
            "POST", "/campaigns", "CREATE_CAMPAIGN",
            payload=campaign.to_payload(),
            parse=NewCampaignResponse.model_validate
        )

    def update_campaign_content(self, campaign_id: int, html: str, plain: str) -> MailerLiteResult:
        """
        Upload HTML and plain-text content for a draft campaign.

        The plain text must contain {$unsubscribe} and the HTML must contain
        {$unsubscribe} and {$url}; MailerLite answers 422 otherwise.
        """
        operation_name = f"UPDATE_CAMPAIGN_CONTENT[{campaign_id}]"
        if not _is_id(campaign_id):
            return self._invalid(operation_name, "campaign_id must be a non-negative integer")
        try:
            content = CampaignContent(html=html, plain=plain)
        except ValueError as e:
            return self._invalid(operation_name, str(e))

        self.logger.info(f"Updating campaign content: {campaign_id}")
        return self._request("PUT", f"/campaigns/{campaign_id}/content", operation_name, payload=content.to_payload())

    def send_campaign(
        self,
        campaign_id: int,
        schedule: Optional[Union[CampaignSchedule, Dict[str, Any]]] = None
    ) -> MailerLiteResult:
        """
        Send a campaign now, or schedule it.

        Args:
            campaign_id: MailerLite campaign ID
            schedule: Optional CampaignSchedule or dict, e.g. {"type": 2, "date": "2026-11-01 09:00"}
        """
        operation_name = f"SEND_CAMPAIGN[{campaign_id}]"
        if not _is_id(campaign_id):
            return self._invalid(operation_name, "campaign_id must be a non-negative integer")
        try:
            payload = _coerce(CampaignSchedule, schedule).to_payload() if schedule is not None else None
        except ValueError as e:
            return self._invalid(operation_name, str(e))

        self.logger.info(f"Sending campaign: {campaign_id}", {"schedule": payload})
        return self._request("POST", f"/campaigns/{campaign_id}/actions/send", operation_name, payload=payload)

    def cancel_campaign(self, campaign_id: int) -> MailerLiteResult:
        """Move a scheduled campaign back to drafts."""
        operation_name = f"CANCEL_CAMPAIGN[{campaign_id}]"
        if not _is_id(campaign_id):
            return self._invalid(operation_name, "campaign_id must be a non-negative integer")

        self.logger.info(f"Cancelling campaign: {campaign_id}")
        return self._request("POST", f"/campaigns/{campaign_id}/actions/cancel", operation_name)

    def delete_campaign(self, campaign_id: int) -> MailerLiteResult:
        """
        Delete a (non scheduled) campaign.

        Args:
            campaign_id: MailerLite campaign ID

        Returns:
            MailerLiteResult
        """
        operation_name = f"DELETE_CAMPAIGN[{campaign_id}]"
        if not _is_id(campaign_id):
            return self._invalid(operation_name, "campaign_id must be a non-negative integer")

        self.logger.info(f"Deleting campaign: {campaign_id}")
        return self._request("DELETE", f"/campaigns/{campaign_id}", operation_name)

    # ========================================
    # STATS
    # ========================================

    def get_stats(self) -> MailerLiteResult:
        """
        Get basic stats for the account: subscriber counts, campaigns sent,
        open/click/bounce rates.

        Returns:
            MailerLiteResult; parsed is a Stats
        """
        self.logger.info("Getting account stats")
        return self._request("GET", "/stats", "GET_STATS", parse=Stats.model_validate)


# ============================================================
# CONVENIENCE FUNCTIONS
# ============================================================

def load_mailerlite_lib(config_path: str) -> MailerLiteLib:
    """
    Load MailerLiteLib from a JSON config file.

    Args:
        config_path: Path to JSON config file

    Returns:
        Initialized MailerLiteLib instance
    """
    config = MailerLiteConfig(config_path=config_path)
    return MailerLiteLib(config)


def load_mailerlite_lib_from_dict(config_dict: Dict) -> MailerLiteLib:
    """Load MailerLiteLib from a config dict."""
    config = MailerLiteConfig(config_dict=config_dict)
    return MailerLiteLib(config)


def load_mailerlite_lib_from_env() -> MailerLiteLib:
    """Load MailerLiteLib from MAILERLITE_* environment variables only."""
    return MailerLiteLib(MailerLiteConfig())
