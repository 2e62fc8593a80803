"""
Shared constants and HTML page builders for the CU post tracker test suite.

Pages built here mirror the markup of the CU post tracking result page:
a ``.tracking-result`` block holding the sender/recipient blocks and a
newest-first list of ``.tracking-result-detail-item`` entries.
"""

from typing import Iterable, Optional
from unittest.mock import Mock


# ============================================================================
# TEST CONSTANTS
# ============================================================================

class FixtureConstants:
    """Centralized test constants to ensure consistency across test suites."""

    TRACKING_NUMBER = "460305642521"
    OTHER_TRACKING_NUMBER = "460305649999"

    TRACKING_URL = "https://www.cupost.co.kr/postbox/delivery/allResult.cupost"
    FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

    SENDER_NAME = "김*수"
    RECIPIENT_NAME = "이*영"
    GOODS_NAME = "의류"

    GOODS_NAME_KEY = "kr.cupost/raw/goodsName"


class PageBuilder:
    """Helper class for building CU post tracking pages."""

    @staticmethod
    def detail_item(
        date_time: str = "2026-01-16<br>10:57:48",
        title: str = "집하완료",
        location: str = "서울",
    ) -> str:
        return (
            '<li class="tracking-result-detail-item">'
            f'<div class="tracking-result-detail-date">{date_time}</div>'
            f'<div class="tracking-result-detail-title">{title}</div>'
            f'<div class="tracking-result-detail-name">{location}</div>'
            "</li>"
        )

    @staticmethod
    def party(label: str, name: str, goods_name: Optional[str] = None) -> str:
        goods_html = ""
        if goods_name is not None:
            goods_html = f'<div class="tracking-product"><span>{goods_name}</span></div>'
        return (
            '<div class="tracking-party">'
            f'<div class="tracking-label"><span>{label}</span></div>'
            f'<div class="tracking-name">{name}</div>'
            f"{goods_html}"
            "</div>"
        )

    @staticmethod
    def sender(name: str = FixtureConstants.SENDER_NAME) -> str:
        return PageBuilder.party("보내는 분", name)

    @staticmethod
    def recipient(
        name: str = FixtureConstants.RECIPIENT_NAME,
        goods_name: str = FixtureConstants.GOODS_NAME,
    ) -> str:
        return PageBuilder.party("받는 분", name, goods_name)

    @staticmethod
    def page(
        items: Iterable[str] = (),
        parties: Iterable[str] = (),
        error_message: Optional[str] = None,
        with_result: bool = True,
    ) -> str:
        error_html = ""
        if error_message is not None:
            error_html = f'<div class="MsgError"><strong>{error_message}</strong></div>'

        result_html = ""
        if with_result:
            result_html = (
                '<div class="tracking-result">'
                f'{"".join(parties)}'
                f'<ul class="tracking-result-detail">{"".join(items)}</ul>'
                "</div>"
            )

        return f"<html><body>{error_html}{result_html}</body></html>"

    @staticmethod
    def full_page() -> str:
        """A delivered shipment with both parties and four events, newest first."""
        return PageBuilder.page(
            items=[
                PageBuilder.detail_item("2026-01-18<br>14:20:11", "배달완료", "강남"),
                PageBuilder.detail_item("2026-01-18<br>08:02:45", "배송출발", "강남"),
                PageBuilder.detail_item("2026-01-17<br>03:15:00", "허브 도착", "옥천HUB"),
                PageBuilder.detail_item("2026-01-16<br>10:57:48", "집하완료", "서울"),
            ],
            parties=[PageBuilder.sender(), PageBuilder.recipient()],
        )


def make_fetcher(html: str) -> Mock:
    """Upstream fetcher stub whose response body is ``html``."""
    fetcher = Mock()
    fetcher.fetch.return_value = Mock(text=html)
    return fetcher
