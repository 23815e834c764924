# ann/src/azuraforge_ann/network.py
"""
Tam bağlantılı ileri beslemeli sinir ağı.

Ağ, her katmanın aktivasyonunu (signal) ve katmanlar arası ağırlık
matrislerini tutar. Bias terimi ağırlık matrisinin ilk satırına katlanır;
böylece bias, sıradan bir ağırlık gibi optimize edilir.
"""
from typing import Any, Dict, List, Optional, Sequence, Union

from .activations import sigmoid, sigmoid_derivative
from .backend import scope, xp
from .callbacks import ProgressLogger
from .config import NetworkConfig, TrainOptions, validate_network_config
from .learner import Learner


class Network:
    def __init__(self, layers: Sequence[int], init_range: float = 0.05, dtype=xp.float32, seed: Optional[int] = None):
        if len(layers) < 2:
            raise ValueError(f"A network needs at least 2 layers, got {len(layers)}.")
        if any(int(size) != size or size < 1 for size in layers):
            raise ValueError(f"Layer sizes must be positive integers, got {list(layers)}.")

        self.layer_sizes: List[int] = [int(size) for size in layers]
        self.num_layers = len(self.layer_sizes)
        self.dtype = dtype

        rng = xp.random.RandomState(seed)
        self._signal = []
        self._weights = []
        for i in range(self.num_layers):
            self._signal.append(xp.empty((0, self.layer_sizes[i]), dtype=dtype))
            if i < self.num_layers - 1:
                # [-init_range/2, init_range/2] aralığında düzgün dağılım; ilk satır bias
                w = rng.rand(self.layer_sizes[i] + 1, self.layer_sizes[i + 1]) * init_range - init_range / 2
                self._weights.append(w.astype(dtype))

    @classmethod
    def from_config(cls, config: Union[NetworkConfig, Dict[str, Any]], dtype=xp.float32) -> "Network":
        cfg = validate_network_config(config)
        return cls(cfg.layers, init_range=cfg.range, dtype=dtype, seed=cfg.seed)

    def get_weights(self) -> List:
        """Ağırlıkların bağımsız kopyalarını döndürür."""
        return [w.copy() for w in self._weights]

    def get_signal(self, index: int):
        """Verilen katmanın son aktivasyonunun kopyasını döndürür."""
        return self._signal[index].copy()

    def add_bias(self, input):
        """(batch, n) girdinin başına birlerden oluşan bir sütun ekler -> (batch, n+1)."""
        ones = xp.ones((input.shape[0], 1), dtype=input.dtype)
        return xp.concatenate((ones, input), axis=1)

    def forward_propagate(self, input) -> None:
        self._signal[0] = xp.asarray(input, dtype=self.dtype)

        for i in range(self.num_layers - 1):
            with scope():
                self._forward_layer(i)

    def _forward_layer(self, i: int) -> None:
        # Ara diziler bu metodun yerelleridir; dönüşte serbest kalırlar
        in_vec = self.add_bias(self._signal[i])
        out_vec = in_vec @ self._weights[i]
        self._signal[i + 1] = sigmoid(out_vec)

    def back_propagate(self, target, alpha: float) -> None:
        """
        Geri yayılımın tek adımı: çıkış katmanından girişe doğru her ağırlık
        matrisini yerinde günceller.

        Bir önceki katmana aktarılan hata, az önce güncellenmiş ağırlıkla
        hesaplanır.
        """
        with scope():
            target = xp.asarray(target, dtype=self.dtype)
            err = self._signal[self.num_layers - 1] - target
            m = target.shape[0]
            del target

            for i in range(self.num_layers - 2, -1, -1):
                with scope():
                    err = self._backward_layer(i, err, alpha, m)

    def _backward_layer(self, i: int, err, alpha: float, m: int):
        """i. ağırlık matrisini günceller ve i. katmana ait hatayı döndürür."""
        out_vec = self._signal[i + 1]
        in_vec = self.add_bias(self._signal[i])
        delta = (sigmoid_derivative(out_vec) * err).T

        # Ağırlıkları ayarla
        grad = (delta @ in_vec) * alpha * -1 / m
        self._weights[i] += grad.T

        # Bias sütununun hatasını at; kopya, tam çarpım sonucunu bırakır
        prev_err = delta.T @ self._weights[i].T
        return prev_err[:, 1:self.layer_sizes[i] + 1].copy()

    def predict(self, input):
        self.forward_propagate(input)
        return self._signal[self.num_layers - 1].copy()

    def train(self, input, target, options: Union[TrainOptions, Dict[str, Any]], callbacks: Optional[list] = None) -> float:
        """
        Ağı mini-batch gradyan inişiyle eğitir ve son doğrulama hatasını döndürür.
        `callbacks` verilmezse ilerleme her 10 epoch'ta bir loglanır.
        """
        if callbacks is None:
            callbacks = [ProgressLogger()]
        return Learner(self, callbacks=callbacks).fit(input, target, options)
