"""
Application detail state.

Holds the raw record for one application together with loading/error
flags, and exposes the normalized view of whatever is loaded.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .client import LOAD_FAILED_MESSAGE, RetrievalError, fetch_application_by_id
from .config import Settings, load_settings
from .logger import get_logger
from .methods import method_code, resolve_method
from .normalize import normalize_application


@dataclass
class DetailApplicationState:
    data: Optional[Dict[str, Any]] = None
    loading: bool = False
    error: Optional[str] = None


class ApplicationDetail:
    """
    Loads one application and serves its canonical view.

    Args:
        fetcher: Callable taking an application id and returning the raw record
        settings: Display settings (default: loaded from the environment)
        notify: Called once with the message of each failed fetch
    """

    def __init__(
        self,
        fetcher: Callable[[str], Dict[str, Any]] = fetch_application_by_id,
        settings: Optional[Settings] = None,
        notify: Optional[Callable[[str], None]] = None,
    ):
        self.fetcher = fetcher
        self.settings = settings or load_settings()
        self.notify = notify or (lambda message: get_logger().error(message))
        self.state = DetailApplicationState()

    def fetch_application_detail(self, application_id: str) -> None:
        """Fetch a record into state. Previous data is kept if the fetch fails."""
        self.state.loading = True
        self.state.error = None
        try:
            data = self.fetcher(application_id)
            if not data:
                raise RetrievalError(LOAD_FAILED_MESSAGE)
            self.state.data = data
        except RetrievalError as e:
            self.state.error = e.message or LOAD_FAILED_MESSAGE
            self.notify(self.state.error)
        except Exception as e:
            get_logger().error("Application detail fetch failed", error_type=type(e).__name__, error=str(e))
            self.state.error = str(e) or LOAD_FAILED_MESSAGE
            self.notify(self.state.error)
        finally:
            self.state.loading = False

    def get_normalized_data(self) -> Optional[Dict[str, Any]]:
        """Canonical view of the loaded record, or None if nothing is loaded."""
        if not self.state.data:
            return None
        if not self.state.data.get("application"):
            raise ValueError("Application record has no 'application' section")

        method = resolve_method(method_code(self.state.data))
        view = normalize_application(
            self.state.data,
            method,
            asset_base_url=self.settings.static_asset_base_url,
            date_format=self.settings.date_format,
            utc_offset_hours=self.settings.utc_offset_hours,
        )
        get_logger().record_normalization(method)
        return view
