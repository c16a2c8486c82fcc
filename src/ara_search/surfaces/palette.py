"""
Command palette: a closed/open overlay with keyboard selection.

Opening resets the query, selection and results to the idle preview.
Every query change recomputes results and re-clamps the selected index
in the same call, so the index is never out of range when observed.
"""

from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from loguru import logger

from ara_search.config import Settings, palette_config, settings as default_settings
from ara_search.schemas.results import ResultView, SearchableRecord
from ara_search.search.engine import QueryState, SearchEngine
from ara_search.utils.text import preview


Navigator = Callable[[str], None]


class PaletteStatus(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


class CommandPalette:
    """
    Palette lifecycle and selection state machine.
    
    The navigator receives the committed url; how the palette gets
    opened (hotkey, button) is up to the caller.
    """
    
    def __init__(
        self,
        corpus: Sequence[SearchableRecord],
        navigate: Navigator,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize palette (closed).
        
        Args:
            corpus: Full corpus including the static page catalog
            navigate: Receives the url of a committed result
            settings: Preview size, result limit and description length
        """
        self.settings = settings or default_settings
        self.engine = SearchEngine(corpus, palette_config(self.settings))
        self.navigate = navigate
        
        self.status = PaletteStatus.CLOSED
        self.state = QueryState()
        self.selected_index = 0
        self.view: ResultView = self.engine.idle_view()
    
    # Lifecycle
    
    @property
    def is_open(self) -> bool:
        return self.status == PaletteStatus.OPEN
    
    def open(self) -> None:
        self.status = PaletteStatus.OPEN
        self.state = QueryState()
        self.selected_index = 0
        self.view = self.engine.idle_view()
        logger.debug("Palette opened")
    
    def close(self) -> None:
        if self.is_open:
            logger.debug("Palette closed")
        self.status = PaletteStatus.CLOSED
    
    def toggle(self) -> None:
        if self.is_open:
            self.close()
        else:
            self.open()
    
    def backdrop_click(self) -> None:
        self.close()
    
    # Query and selection
    
    @property
    def query(self) -> str:
        return self.state.query
    
    @property
    def results(self) -> List[SearchableRecord]:
        return self.view.ordered
    
    @property
    def selected(self) -> Optional[SearchableRecord]:
        if not self.results:
            return None
        return self.results[self.selected_index]
    
    def set_query(self, query: str) -> ResultView:
        """Recompute results and re-clamp the selection (open only)"""
        if not self.is_open:
            logger.debug("Ignoring query while palette is closed")
            return self.view
        
        self.state.query = query or ""
        self.view = self.engine.view(self.state)
        if self.selected_index >= len(self.results):
            self.selected_index = 0
        return self.view
    
    def move_down(self) -> int:
        if self.is_open and self.results:
            self.selected_index = min(self.selected_index + 1, len(self.results) - 1)
        return self.selected_index
    
    def move_up(self) -> int:
        if self.is_open:
            self.selected_index = max(self.selected_index - 1, 0)
        return self.selected_index
    
    def commit(self, index: Optional[int] = None) -> Optional[str]:
        """
        Navigate to the selected (or given) result and close.
        
        Args:
            index: Result to commit instead of the selection (e.g. a click)
            
        Returns:
            Committed url, or None when there was nothing to commit
        """
        if not self.is_open or not self.results:
            return None
        
        index = self.selected_index if index is None else index
        if not 0 <= index < len(self.results):
            return None
        
        url = self.results[index].url
        self.close()
        logger.info(f"Palette navigating to {url}")
        self.navigate(url)
        return url
    
    def handle_key(self, key: str) -> Optional[str]:
        """
        Dispatch an in-palette key press.
        
        Args:
            key: "ArrowDown", "ArrowUp", "Enter" or "Escape"
            
        Returns:
            Committed url for Enter, else None
        """
        if not self.is_open:
            return None
        if key == "ArrowDown":
            self.move_down()
        elif key == "ArrowUp":
            self.move_up()
        elif key == "Enter":
            return self.commit()
        elif key == "Escape":
            self.close()
        return None
    
    def row(self, record: SearchableRecord) -> Dict[str, Optional[str]]:
        """Display projection for one result"""
        return {
            "type": record.type.label,
            "title": record.title,
            "description": preview(record.description, self.settings.description_preview_length),
            "url": record.url,
            "meta": record.meta,
        }
