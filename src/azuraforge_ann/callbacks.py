# ann/src/azuraforge_ann/callbacks.py

import logging
from typing import TYPE_CHECKING, List, Optional
from .events import Event

# Döngüsel importu önlemek için, sadece tip kontrolü sırasında Learner'ı import et
if TYPE_CHECKING:
    from .learner import Learner

class Callback:
    """
    Tüm callback'lerin temel sınıfı.
    Kendisini çalıştıran Learner'a bir referans tutar.
    """
    def __init__(self):
        self.learner: Optional['Learner'] = None

    def set_learner(self, learner: 'Learner'):
        """Bu metod, Learner tarafından çağrılarak referansı ayarlar."""
        self.learner = learner

    def __call__(self, event: Event):
        """
        Gelen olaya göre ilgili metodu (örn: on_epoch_end) çağırır.
        """
        method = getattr(self, f"on_{event.name}", None)
        if method:
            method(event)

    # Olay metotları
    def on_train_begin(self, event: Event) -> None: pass
    def on_train_end(self, event: Event) -> None: pass
    def on_epoch_begin(self, event: Event) -> None: pass
    def on_epoch_end(self, event: Event) -> None: pass
    def on_batch_end(self, event: Event) -> None: pass


class ProgressLogger(Callback):
    """
    Her `every` epoch'ta bir epoch numarasını, güncel hatayı ve son `every`
    epoch'un ortalama süresini loglar.
    """
    def __init__(self, every: int = 10):
        super().__init__()
        if every < 1:
            raise ValueError(f"ProgressLogger 'every' must be positive, got {every}.")
        self.every = every
        self.logger = logging.getLogger(self.__class__.__name__)
        self._durations: List[float] = []

    def on_train_begin(self, event: Event):
        self._durations = []

    def on_epoch_end(self, event: Event):
        epoch = event.payload["epoch"]
        self._durations.append(event.payload["duration"])

        if epoch % self.every == 0:
            avg = sum(self._durations) / len(self._durations)
            self.logger.info(f"Epoch: {epoch}, Error: {event.payload['error']:.6f}, Duration: {avg:.6f} seconds")
            self._durations = []


class ErrorHistory(Callback):
    """Her epoch'un doğrulama hatasını bir listede biriktirir."""
    def __init__(self):
        super().__init__()
        self.errors: List[float] = []
        self.converged_epoch: Optional[int] = None

    def on_train_begin(self, event: Event):
        self.errors = []
        self.converged_epoch = None

    def on_epoch_end(self, event: Event):
        self.errors.append(event.payload["error"])
        if event.payload.get("converged"):
            self.converged_epoch = event.payload["epoch"]
