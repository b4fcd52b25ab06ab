"""Menus: clickable text items that emit named signals."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

Color = Tuple[int, int, int]
Position = Tuple[float, float]

WHITE: Color = (255, 255, 255)
YELLOW: Color = (255, 255, 0)
CYAN: Color = (0, 255, 255)


class MenuAction(Enum):
    NEW_GAME = auto()
    RESUME_GAME = auto()
    LEVEL_SELECTOR = auto()
    OPTIONS = auto()
    QUIT = auto()
    BENCHMARK = auto()
    SELECT_LEVEL = auto()
    START_LEVEL = auto()
    START_BENCHMARK = auto()
    BACK_TO_MAIN_MENU = auto()
    QUIT_LEVEL = auto()


@dataclass(eq=False)
class MenuItem:
    """A text entry that changes colour while hovered."""

    text: str
    color: Color
    action: MenuAction
    payload: Any = None
    position: Position = (0, 0)
    font_size: int = 12
    hover_color: Color = YELLOW
    text_color: Color = field(default=WHITE, init=False)

    def __post_init__(self) -> None:
        self.text_color = self.color

    def hover_enter(self) -> None:
        self.text_color = self.hover_color

    def hover_leave(self) -> None:
        self.text_color = self.color


@dataclass(eq=False)
class TogglableMenuItem(MenuItem):
    """A menu item that can stay selected; hovering is ignored while selected."""

    selected_color: Color = CYAN
    selected: bool = field(default=False, init=False)

    def set_selected(self, selected: bool) -> None:
        self.selected = selected
        self.text_color = self.selected_color if selected else self.color

    def hover_enter(self) -> None:
        if not self.selected:
            super().hover_enter()

    def hover_leave(self) -> None:
        if not self.selected:
            super().hover_leave()


_ACTION_SIGNALS: Mapping[MenuAction, str] = {
    MenuAction.NEW_GAME: "new_game_selected",
    MenuAction.RESUME_GAME: "resume_game_selected",
    MenuAction.LEVEL_SELECTOR: "level_selector_selected",
    MenuAction.BENCHMARK: "benchmark_selected",
    MenuAction.START_LEVEL: "start_level_selected",
    MenuAction.START_BENCHMARK: "start_benchmark_selected",
    MenuAction.QUIT_LEVEL: "quit_level_selected",
    MenuAction.BACK_TO_MAIN_MENU: "back_to_main_menu_selected",
    MenuAction.QUIT: "window_closed",
}


class Menu:
    """A screen of menu items; clicking an item emits the signal for its action."""

    SIGNALS = frozenset(
        {
            "new_game_selected",
            "level_selector_selected",
            "level_selected",
            "start_level_selected",
            "start_benchmark_selected",
            "quit_level_selected",
            "back_to_main_menu_selected",
            "resume_game_selected",
            "benchmark_selected",
            "window_closed",
        }
    )

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.prompt: Optional[str] = None
        self.items: List[MenuItem] = []
        self._handlers: Dict[str, List[Callable[..., None]]] = {
            name: [] for name in self.SIGNALS
        }

    def connect(self, signal: str, handler: Callable[..., None]) -> None:
        if signal not in self._handlers:
            raise ValueError(f"unknown signal: {signal!r}")
        self._handlers[signal].append(handler)

    def _emit(self, signal: str, *args: Any) -> None:
        for handler in list(self._handlers[signal]):
            handler(*args)

    def _make_item(self, text: str, color: Color, action: MenuAction) -> MenuItem:
        return MenuItem(text, color, action)

    def add_item(
        self,
        text: str,
        action: MenuAction,
        position: Position,
        payload: Any = None,
    ) -> MenuItem:
        """Add a white item at ``position`` and return it."""
        item = self._make_item(text, WHITE, action)
        item.payload = payload
        item.position = (position[0], position[1])
        self.items.append(item)
        return item

    def click(self, item: MenuItem) -> None:
        if not any(existing is item for existing in self.items):
            raise ValueError("item does not belong to this menu")
        if item.action is MenuAction.SELECT_LEVEL:
            if item.payload is not None:
                self._emit("level_selected", item.payload)
            return
        signal = _ACTION_SIGNALS.get(item.action)
        if signal is not None:
            self._emit(signal)


def _place(
    menu: Menu,
    text: str,
    action: MenuAction,
    position: Position,
    font_size: int,
    payload: Any = None,
) -> MenuItem:
    item = menu.add_item(text, action, position, payload)
    item.font_size = font_size
    return item


def main_menu(width: int, height: int) -> Menu:
    menu = Menu(width, height)
    _place(menu, "Level Selector", MenuAction.LEVEL_SELECTOR, (100, 150), 100)
    _place(menu, "Options", MenuAction.OPTIONS, (100, 300), 100)
    _place(menu, "Benchmark", MenuAction.BENCHMARK, (100, 450), 100)
    _place(menu, "Quit", MenuAction.QUIT, (100, 600), 100)
    return menu


def pause_menu(width: int, height: int) -> Menu:
    menu = Menu(width, height)
    _place(menu, "Resume Game", MenuAction.RESUME_GAME, (100, 150), 100)
    _place(menu, "Options", MenuAction.OPTIONS, (100, 300), 100)
    _place(menu, "Quit to Main Menu", MenuAction.QUIT_LEVEL, (100, 450), 100)
    return menu


def benchmark_prompt(width: int, height: int) -> Menu:
    menu = Menu(width, height)
    menu.prompt = "Are you sure you want to run benchmark?"
    _place(menu, "Yes", MenuAction.START_BENCHMARK, (100, 300), 100)
    _place(menu, "No", MenuAction.BACK_TO_MAIN_MENU, (100, 450), 100)
    return menu


class LevelSelector(Menu):
    """Lists levels; one can be selected and then started."""

    SIGNALS = Menu.SIGNALS | {"level_started"}

    def __init__(self, width: int, height: int) -> None:
        super().__init__(width, height)
        self.current_level: Any = None
        self.level_allowed_to_start = False
        self.selected_item: Optional[TogglableMenuItem] = None
        half = width // 2
        _place(self, "Back", MenuAction.BACK_TO_MAIN_MENU, (half * 0.9, height * 0.8), 32)
        _place(self, "Start Level", MenuAction.START_LEVEL, (half * 1.1, height * 0.8), 32)
        self.connect("level_selected", self._on_level_selected)
        self.connect("start_level_selected", self._on_start_level_selected)

    def _make_item(self, text: str, color: Color, action: MenuAction) -> MenuItem:
        return TogglableMenuItem(text, color, action)

    def set_level_data(self, levels: Mapping[int, Any]) -> None:
        """Add one entry per level, in order of level key."""
        y = 50
        for _, level in sorted(levels.items()):
            text = f"Level {level.level_number}: {level.name}"
            _place(self, text, MenuAction.SELECT_LEVEL, (self.width // 2, y), 22, level)
            y += 35

    def click(self, item: MenuItem) -> None:
        if (
            isinstance(item, TogglableMenuItem)
            and item.action is MenuAction.SELECT_LEVEL
            and any(existing is item for existing in self.items)
        ):
            if self.selected_item is not None:
                self.selected_item.set_selected(False)
            self.selected_item = item
            item.set_selected(True)
        super().click(item)

    def _on_level_selected(self, level: Any) -> None:
        self.current_level = level
        self.level_allowed_to_start = True

    def _on_start_level_selected(self) -> None:
        if self.level_allowed_to_start:
            self._emit("level_started", self.current_level)