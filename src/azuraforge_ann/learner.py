# ========== DOSYA: ann/src/azuraforge_ann/learner.py ==========
import logging
import time
from typing import Any, Dict, List, Optional, Union, TYPE_CHECKING

from .backend import scope, xp
from .callbacks import Callback
from .config import TrainOptions, validate_options
from .events import Event
from .losses import Loss, ScaledRootSumSquaredError

if TYPE_CHECKING:
    from .network import Network

class Learner:
    """
    Network için mini-batch eğitim döngüsü.

    Son batch her zaman doğrulamaya ayrılır ve hiçbir zaman ağırlık
    güncellemesinde kullanılmaz.
    """
    def __init__(self, network: 'Network', criterion: Optional[Loss] = None, callbacks: Optional[List[Callback]] = None):
        self.network = network
        self.criterion = criterion or ScaledRootSumSquaredError()
        self.callbacks = callbacks or []
        self.logger = logging.getLogger(self.__class__.__name__)

        for cb in self.callbacks:
            cb.set_learner(self)

        self.history: Dict[str, List[float]] = {}

    def _publish(self, event_name: str, payload: Optional[Dict[str, Any]] = None):
        event = Event(name=event_name, learner=self, payload=payload or {})
        for cb in self.callbacks:
            cb(event)

    def fit(self, input, target, options: Union[TrainOptions, Dict[str, Any]]) -> float:
        opts = validate_options(options)
        input = xp.asarray(input, dtype=self.network.dtype)
        target = xp.asarray(target, dtype=self.network.dtype)

        num_samples = input.shape[0]
        batch_size = opts.batch_size
        num_batches = num_samples // batch_size
        # Doğrulama batch'i: son batch (batch_size >= num_samples ise tüm girdi)
        val_start = max((num_batches - 1) * batch_size, 0)

        self.history = {"error": []}
        err = 0.0

        self.logger.info(
            f"Training {self.network.layer_sizes} on {num_samples} samples: "
            f"{max(num_batches - 1, 0)} training batches of {batch_size}, validation rows {val_start}..{num_samples - 1}"
        )
        self._publish("train_begin", payload={"total_epochs": opts.max_epochs, "num_samples": num_samples})

        for epoch in range(1, opts.max_epochs + 1):
            start = time.perf_counter()
            self._publish("epoch_begin", payload={"epoch": epoch, "total_epochs": opts.max_epochs})

            with scope(release=True):
                for j in range(num_batches - 1):
                    with scope():
                        self._train_batch(input, target, j * batch_size, batch_size, opts.alpha)
                    self._publish("batch_end", payload={"epoch": epoch, "batch_index": j})

                with scope():
                    # Son batch ile doğrula
                    err = self._validate(input, target, val_start)

            duration = time.perf_counter() - start
            self.history["error"].append(err)
            converged = err < opts.max_error

            self._publish("epoch_end", payload={
                "epoch": epoch, "total_epochs": opts.max_epochs, "error": err,
                "duration": duration, "converged": converged,
            })

            # Yakınsama kriteri sağlandı mı?
            if converged:
                self.logger.info(f"Converged on epoch {epoch} with error {err:.6f}")
                break

        self._publish("train_end", payload={"error": err, "epochs_run": len(self.history["error"])})
        return err

    def _train_batch(self, input, target, start_pos: int, batch_size: int, alpha: float) -> None:
        # Batch dilimleri bu metodun yerelleridir; dönüşte serbest kalırlar
        x = input[start_pos:start_pos + batch_size]
        y = target[start_pos:start_pos + batch_size]

        self.network.forward_propagate(x)
        self.network.back_propagate(y, alpha)

    def _validate(self, input, target, val_start: int) -> float:
        out_vec = self.network.predict(input[val_start:])
        return self.criterion(out_vec, target[val_start:])
