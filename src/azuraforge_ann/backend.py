# ann/src/azuraforge_ann/backend.py
"""
Dizi hesaplama arka ucunu (NumPy veya CuPy) seçer.

Paketin geri kalanı diziye yalnızca buradan dışa aktarılan `xp` üzerinden
erişir; böylece aynı kod hem CPU'da hem GPU'da çalışır.
"""
import logging
import os
from contextlib import contextmanager
from typing import Iterator

DEVICE = os.environ.get("AZURAFORGE_DEVICE", "cpu").lower()

if DEVICE == "gpu":
    try:
        import cupy as xp
    except ImportError as e:
        raise ImportError(
            "AZURAFORGE_DEVICE=gpu requires CuPy. Install it with "
            "`pip install azuraforge-ann[gpu]` or choose AZURAFORGE_DEVICE=cpu."
        ) from e
elif DEVICE == "cpu":
    import numpy as xp
else:
    raise ValueError(f"Unknown AZURAFORGE_DEVICE '{DEVICE}'. Expected 'cpu' or 'gpu'.")

logging.getLogger(__name__).debug(f"Array backend: {xp.__name__} ({DEVICE})")

_scope_depth = 0


def scope_depth() -> int:
    """Şu anda açık olan iç içe scope sayısını döndürür."""
    return _scope_depth


def _release_pool() -> None:
    # NumPy bloklarını referans sayımı serbest bırakır; CuPy havuzu ise elle boşaltılır.
    if DEVICE == "gpu":
        xp.get_default_memory_pool().free_all_blocks()


@contextmanager
def scope(release: bool = False) -> Iterator[None]:
    """
    Ara dizilerin yaşam alanını sınırlayan blok.

    Ara diziler, blok içinde çağrılan yardımcı metotların yerel değişkenleridir
    ve metot dönünce referans sayımıyla serbest kalır. `release=True` verilirse
    blok kapanırken (hata ile çıkılsa bile) GPU bellek havuzundaki boş bloklar
    da cihaza geri verilir; eğitim döngüsü bunu epoch başına bir kez yapar.
    """
    global _scope_depth
    _scope_depth += 1
    try:
        yield
    finally:
        _scope_depth -= 1
        if release:
            _release_pool()
