import sys

from cupost_tracker.carriers.cupost import CUpost
from cupost_tracker.errors import NotFoundError
from cupost_tracker.fetcher import RequestsUpstreamFetcher
from cupost_tracker.logger import get_logger
from cupost_tracker.models.tracking import CarrierTrackInput, TrackInfo

logger = get_logger(__name__)

DEFAULT_TRACKING_NUMBER = "460305642521"


def print_track_info(track_info: TrackInfo):
    sender = track_info.sender.name if track_info.sender else None
    recipient = track_info.recipient.name if track_info.recipient else None
    print(f"보내는 분: {sender or 'N/A'}")
    print(f"받는 분: {recipient or 'N/A'}")
    print(f"\n=== Events ({len(track_info.events)}) ===\n")

    for event in track_info.events:
        time = event.time.strftime("%Y-%m-%d %H:%M:%S") if event.time else "N/A"
        location = event.location.name if event.location else None
        print(f"[{time}] {event.status.name} ({event.status.code.value})")
        print(f"  {location or 'N/A'}")
        print("")


def main(tracking_number: str) -> int:
    logger.info(f"Tracking kr.cupost shipment {tracking_number}")

    carrier = CUpost(RequestsUpstreamFetcher())

    try:
        track_info = carrier.track(CarrierTrackInput(tracking_number=tracking_number))
    except NotFoundError as e:
        logger.error(
            f"No tracking information for {tracking_number}: {e.message}",
            extra={"tracking_number": tracking_number},
        )
        return 1
    except Exception as e:
        logger.exception(
            f"Tracking failed: {e}",
            extra={
                "tracking_number": tracking_number,
                "error": str(e),
                "error_type": type(e).__name__,
            },
        )
        return 1

    print_track_info(track_info)
    return 0


if __name__ == "__main__":
    tracking_number = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_TRACKING_NUMBER
    sys.exit(main(tracking_number))
