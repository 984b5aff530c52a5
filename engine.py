import logging

from events import PointerEvent, TickEvent, QuitEvent

logger = logging.getLogger(__name__)


class InteractionEngine:
    """Owns the key buffer and services pointer and tick events.

    The buffer order is the paint order (back to front). Hit-testing walks
    it in reverse, so whatever is painted on top is tested first. Both
    handlers run on the caller's thread; nothing here schedules work of
    its own.
    """
    def __init__(self, keys, painter, sink):
        self.keys = list(keys)
        self.painter = painter
        self.sink = sink

    # ---------- Pointer ----------
    def hit_test(self, x, y):
        for key in reversed(self.keys):
            if key.bounds.contains_point(x, y):
                return key
        return None

    def handle_pointer(self, x, y):
        key = self.hit_test(x, y)
        if key is None:
            logger.debug("Click at (%s, %s) missed every key", x, y)
            return None
        key.strike(self.sink)
        return key

    # ---------- Tick ----------
    def handle_tick(self, dt):
        for key in self.keys:
            key.advance(dt)
        self.paint()

    def paint(self):
        for key in self.keys:
            stroke_color, line_width = key.stroke
            self.painter.draw_filled_rect(key.bounds, key.current_color.to_display_string(False))
            self.painter.draw_stroked_rect(key.bounds, stroke_color, line_width)

    # ---------- Event loop ----------
    def dispatch(self, event):
        if isinstance(event, QuitEvent):
            return False
        if isinstance(event, PointerEvent):
            self.handle_pointer(event.x, event.y)
        elif isinstance(event, TickEvent):
            self.handle_tick(event.dt)
        else:
            logger.warning("Ignoring unknown event %r", event)
        return True

    def run(self, events):
        for event in events:
            if not self.dispatch(event):
                break
