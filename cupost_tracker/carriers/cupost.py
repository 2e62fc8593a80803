from datetime import datetime
from typing import Callable, List, NamedTuple, Optional, Tuple
from urllib.parse import urlencode

from bs4 import BeautifulSoup, Tag

from cupost_tracker.carriers.base import Carrier, carrier_specific_key
from cupost_tracker.config import (
    CARRIER_COUNTRY_CODE,
    CARRIER_ID,
    CUPOST_TRACKING_URL,
)
from cupost_tracker.errors import NotFoundError
from cupost_tracker.fetcher import UpstreamFetcher
from cupost_tracker.logger import get_context_logger
from cupost_tracker.models.tracking import (
    CarrierTrackInput,
    ContactInfo,
    Location,
    TrackEvent,
    TrackEventStatus,
    TrackEventStatusCode,
    TrackInfo,
)
from cupost_tracker.utils.html import (
    find_labelled_containers,
    inner_html_with_breaks,
    parse_html,
    select_text,
)
from cupost_tracker.utils.timezone import TimezoneHandler, timezone_handler

carrier_logger = get_context_logger(__name__, carrier_id=CARRIER_ID)

NOT_FOUND_MESSAGE = "운송장 정보를 찾을 수 없습니다."

RECIPIENT_LABEL = "받는 분"
SENDER_LABEL = "보내는 분"

# Levels between a party label <span> and the block holding its fields
LABEL_CONTAINER_DEPTH = 2

# Separator substituted for the <br> between date and time
DATE_TIME_SEPARATOR = "T"


def _contains_any(*keywords: str) -> Callable[[str], bool]:
    return lambda status: any(keyword in status for keyword in keywords)


# Evaluated in order against the lower-cased status title; first match wins.
STATUS_RULES: Tuple[Tuple[Callable[[str], bool], TrackEventStatusCode], ...] = (
    (_contains_any("접수", "집하완료"), TrackEventStatusCode.AT_PICKUP),
    (
        lambda status: "도착" in status and "배달" not in status,
        TrackEventStatusCode.IN_TRANSIT,
    ),
    (_contains_any("배달전", "배송출발"), TrackEventStatusCode.OUT_FOR_DELIVERY),
    (_contains_any("배달완료", "인수완료"), TrackEventStatusCode.DELIVERED),
    (_contains_any("배송중", "이동중"), TrackEventStatusCode.IN_TRANSIT),
)


def match_status_code(status_name: str) -> Optional[TrackEventStatusCode]:
    """Classify a status title, or return None when no rule matches."""
    status_lower = status_name.lower()
    for predicate, code in STATUS_RULES:
        if predicate(status_lower):
            return code
    return None


class ScrapeWarning(NamedTuple):
    field: str
    value: str
    reason: str


class CUpost(Carrier):
    carrier_id = CARRIER_ID

    def __init__(
        self,
        upstream_fetcher: UpstreamFetcher,
        tracking_url: str = CUPOST_TRACKING_URL,
    ):
        super().__init__(upstream_fetcher)
        self.tracking_url = tracking_url

    def track(self, input: CarrierTrackInput) -> TrackInfo:
        return CUpostTrackScraper(
            self.upstream_fetcher,
            input.tracking_number,
            tracking_url=self.tracking_url,
        ).track()


class CUpostTrackScraper:
    """
    Scrapes a single CU post tracking page into a TrackInfo.

    One instance serves one call: field-level anomalies are collected in
    ``warnings`` (and logged) instead of failing the whole lookup.
    """

    carrier_id = CARRIER_ID

    def __init__(
        self,
        upstream_fetcher: UpstreamFetcher,
        tracking_number: str,
        tracking_url: str = CUPOST_TRACKING_URL,
        timezone: TimezoneHandler = timezone_handler,
    ):
        self.upstream_fetcher = upstream_fetcher
        self.tracking_number = tracking_number
        self.tracking_url = tracking_url
        self.timezone = timezone
        self.logger = carrier_logger.bind(tracking_number=tracking_number)
        self.warnings: List[ScrapeWarning] = []

    def track(self) -> TrackInfo:
        response = self.upstream_fetcher.fetch(
            self.tracking_url,
            method="POST",
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            data=urlencode({"invoice_no": self.tracking_number, "kind_type": ""}),
        )

        html = response.text
        self.logger.debug("response html", extra={"html": html[:1000]})

        soup = parse_html(html)
        self._ensure_found(soup)

        sender = self._labelled_container(soup, SENDER_LABEL)
        recipient = self._labelled_container(soup, RECIPIENT_LABEL)
        goods_name = ""
        if recipient is not None:
            goods_name = select_text(recipient, ".tracking-product span", first=False)
        events = self._parse_events(soup)

        return TrackInfo(
            sender=ContactInfo(name=self._party_name(sender)),
            recipient=ContactInfo(name=self._party_name(recipient)),
            events=events,
            carrier_specific_data={
                carrier_specific_key(self.carrier_id, "goodsName"): goods_name,
            },
        )

    def _ensure_found(self, soup: BeautifulSoup) -> None:
        error_message = select_text(soup, ".MsgError strong", first=False)
        if error_message or soup.select_one(".tracking-result") is None:
            self.logger.info(
                "tracking information not found",
                extra={"upstream_message": error_message},
            )
            raise NotFoundError(NOT_FOUND_MESSAGE)

    def _labelled_container(self, soup: BeautifulSoup, label: str) -> Optional[Tag]:
        """Block holding the fields for ``label``; the last one wins when repeated."""
        containers = find_labelled_containers(soup, label, LABEL_CONTAINER_DEPTH)
        return containers[-1] if containers else None

    def _party_name(self, container: Optional[Tag]) -> Optional[str]:
        if container is None:
            return None
        return select_text(container, ".tracking-name") or None

    def _parse_events(self, soup: BeautifulSoup) -> Tuple[TrackEvent, ...]:
        events = []
        for item in soup.select(".tracking-result-detail-item"):
            date_time = inner_html_with_breaks(
                item.select_one(".tracking-result-detail-date"), DATE_TIME_SEPARATOR
            )
            status_name = select_text(item, ".tracking-result-detail-title")
            location = select_text(item, ".tracking-result-detail-name")

            if not date_time or not status_name:
                continue

            events.append(
                TrackEvent(
                    status=TrackEventStatus(
                        code=self._parse_status_code(status_name),
                        name=status_name,
                    ),
                    time=self._parse_time(date_time),
                    location=Location(
                        country_code=CARRIER_COUNTRY_CODE,
                        name=location,
                        postal_code=None,
                    ),
                    contact=None,
                    description=f"{status_name} - {location}",
                )
            )

        # The page lists events newest first
        events.reverse()
        return tuple(events)

    def _parse_status_code(self, status_name: str) -> TrackEventStatusCode:
        code = match_status_code(status_name)
        if code is not None:
            return code

        self.warnings.append(ScrapeWarning("status", status_name, "unknown status"))
        self.logger.warning("Unknown status", extra={"status_name": status_name})
        return TrackEventStatusCode.UNKNOWN

    def _parse_time(self, time_str: str) -> Optional[datetime]:
        try:
            return self.timezone.parse_local_datetime(time_str)
        except ValueError as e:
            self.warnings.append(ScrapeWarning("time", time_str, str(e)))
            self.logger.warning(
                "time parse error",
                extra={"input_time": time_str, "invalid_reason": str(e)},
            )
            return None
