"""
View state of the visualizer window and the reducers that change it.

The window never mutates state in place: every user action is a pure
function taking the current ViewState and returning the next one, after
which the window re-renders from scratch.
"""

from dataclasses import dataclass, replace

from utils.themes import THEMES, DEFAULT_THEME

FONT_SIZE_MIN = 10
FONT_SIZE_MAX = 20
FONT_SIZE_DEFAULT = 14

THEME_NAMES = tuple(THEMES)
HIGHLIGHT_MODES = ("tokens", "chain")

DEFAULT_CODE = """// Welcome to React Code Visualizer
import React, { useState, useEffect } from 'react';

const ExampleComponent = () => {
  const [count, setCount] = useState(0);
  const [isVisible, setIsVisible] = useState(true);

  // Effect hook for side effects
  useEffect(() => {
    document.title = `Count: ${count}`;
  }, [count]);

  const handleIncrement = () => {
    setCount(prev => prev + 1);
  };

  const handleDecrement = () => {
    setCount(prev => prev - 1);
  };

  return (
    <div className="container">
      <h1>Counter App</h1>
      {isVisible && (
        <div className="counter-display">
          <p>Current count: {count}</p>
          <button onClick={handleIncrement}>+</button>
          <button onClick={handleDecrement}>-</button>
        </div>
      )}
      <button onClick={() => setIsVisible(!isVisible)}>
        Toggle Visibility
      </button>
    </div>
  );
};

export default ExampleComponent;"""


@dataclass(frozen=True)
class ViewState:
    text: str = ""
    theme: str = DEFAULT_THEME
    font_size: int = FONT_SIZE_DEFAULT
    show_line_numbers: bool = True
    pinned_line: int | None = None
    highlight_mode: str = "tokens"
    notice: str | None = None

    @property
    def lines(self) -> list[str]:
        return self.text.split('\n')


def initial_state() -> ViewState:
    return ViewState(text=DEFAULT_CODE)


def clamp_font_size(size) -> int:
    return max(FONT_SIZE_MIN, min(FONT_SIZE_MAX, int(size)))


def edit_text(state: ViewState, text: str) -> ViewState:
    """Replaces the whole text. A pin left pointing past the last line is dropped."""
    pinned = state.pinned_line
    if pinned is not None and pinned >= len(text.split('\n')):
        pinned = None
    return replace(state, text=text, pinned_line=pinned)


def select_theme(state: ViewState, theme: str) -> ViewState:
    if theme not in THEME_NAMES:
        raise ValueError(f"Unknown theme: {theme!r}")
    return replace(state, theme=theme)


def set_font_size(state: ViewState, size) -> ViewState:
    return replace(state, font_size=clamp_font_size(size))


def set_line_numbers(state: ViewState, show: bool) -> ViewState:
    return replace(state, show_line_numbers=bool(show))


def toggle_pin(state: ViewState, index: int) -> ViewState:
    """
    Clicking a line pins it, clicking another line moves the pin and
    clicking the pinned line again clears it. Indices outside the current
    lines are ignored.
    """
    if index < 0 or index >= len(state.lines):
        return state
    if state.pinned_line == index:
        return replace(state, pinned_line=None)
    return replace(state, pinned_line=index)


def set_highlight_mode(state: ViewState, mode: str) -> ViewState:
    if mode not in HIGHLIGHT_MODES:
        raise ValueError(f"Unknown highlight mode: {mode!r}")
    return replace(state, highlight_mode=mode)


def post_notice(state: ViewState, message: str) -> ViewState:
    return replace(state, notice=message)


def clear_notice(state: ViewState) -> ViewState:
    return replace(state, notice=None)
