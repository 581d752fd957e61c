# A tiny pub/sub event bus to keep layers decoupled.
from typing import Callable, Dict, List

# Controller-facing advisory: emit(NOTICE, message, warning=bool)
NOTICE = "notice"

class EventBus:
    def __init__(self) -> None:
        self._subs: Dict[str, List[Callable]] = {}

    def on(self, topic: str, fn: Callable):
        self._subs.setdefault(topic, []).append(fn)

    def emit(self, topic: str, *args, **kwargs):
        for fn in list(self._subs.get(topic, [])):
            fn(*args, **kwargs)

    def notify(self, message: str, warning: bool = False):
        self.emit(NOTICE, message, warning=warning)
