# Analytics.py
"""
Статистика сжатия и проверочный вывод для кодовой таблицы Хаффмана.

Определения
- total_symbols: сумма частот всех учтённых символов.
- total_bits: сумма частота * длина_кода.
- average_code_length: total_bits / total_symbols, бит на символ.
- fixed_length_bits: ширина равномерного кода для того же алфавита, ceil(log2(n)), не меньше 1.
- entropy: энтропия нулевого порядка распределения частот, бит на символ.
- efficiency: entropy / average_code_length.

Символ таблицы частот, которого нет в кодовой таблице, при подсчёте статистики пропускается,
а при проверочном выводе приводит к CodeLookupError.
"""
# =================================================================================================================

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, List, Tuple

from utils import CodeLookupError, TableLike, normalize_table

# =================================================================================================================

@dataclass(frozen=True)
class CompressionStats:
    total_symbols: int          = 0
    total_bits: int             = 0
    average_code_length: float  = 0.0
    fixed_length_bits: int      = 0
    entropy: float              = 0.0
    efficiency: float           = 0.0
    skipped: Tuple[Hashable, ...] = ()

    @property
    def fixed_length_total_bits(self) -> int:
        return self.fixed_length_bits * self.total_symbols

# =================================================================================================================

def fixed_length_bits(alphabet_size: int) -> int:
    """Ширина равномерного двоичного кода для алфавита из alphabet_size символов."""
    if alphabet_size <= 1:
        return 1
    return math.ceil(math.log2(alphabet_size))

def entropy(freqs: Iterable[int]) -> float:
    """Энтропия нулевого порядка в битах на символ по наблюдённым частотам."""
    counts = [c for c in freqs if c > 0]
    n = sum(counts)
    if n == 0:
        return 0.0

    inv_n = 1.0 / n
    H = 0.0
    for c in counts:
        p = c * inv_n
        H -= p * math.log2(p)
    return H

def compute_stats(table: TableLike, codes: Dict[Hashable, str], verbose: bool = False) -> CompressionStats:
    """Считает итоговое число бит и среднюю длину кода.

    Args:
        table (TableLike): Исходная таблица частот.
        codes (Dict[Hashable, str]): Кодовая таблица.
        verbose (bool): Печатать предупреждение о пропущенных символах.

    Returns:
        CompressionStats: Сводная статистика.
    """
    total_bits = 0
    total_freq = 0
    counted = []
    skipped = []

    for sym, freq in normalize_table(table):
        code = codes.get(sym)
        if code is None:
            skipped.append(sym)
            if verbose:
                print(f"[stats] WARNING: symbol {sym!r} has no code, skipped")
            continue

        total_bits += freq * len(code)
        total_freq += freq
        counted.append(freq)

    average = total_bits / total_freq if total_freq else 0.0
    H = entropy(counted)

    return CompressionStats(
        total_symbols       = total_freq,
        total_bits          = total_bits,
        average_code_length = average,
        fixed_length_bits   = fixed_length_bits(len(counted)),
        entropy             = H,
        efficiency          = (H / average) if average else 0.0,
        skipped             = tuple(skipped),
    )

# =================================================================================================================

def format_stats(stats: CompressionStats, precision: int = 4) -> List[str]:
    """Блок аналитики сжатия, дробные значения с precision знаками после запятой."""
    return [
        "--- Compression Analytics ---",
        f"Total Characters in Message: {stats.total_symbols}",
        f"Total Bits Required: {stats.total_bits} bits",
        f"Average Code Length: {stats.average_code_length:.{precision}f} bits/symbol",
        f"Fixed-Length Baseline: {stats.fixed_length_bits} bits/symbol ({stats.fixed_length_total_bits} bits)",
        f"Entropy: {stats.entropy:.{precision}f} bits/symbol",
        f"Efficiency: {stats.efficiency:.{precision}f}",
        "---------------------------",
    ]

def format_codes(symbols: Iterable[Hashable], codes: Dict[Hashable, str]) -> List[str]:
    """Проверочный вывод: "символ : код" для каждого символа и затем последовательность кодов.

    Raises:
        CodeLookupError: Символ отсутствует в кодовой таблице.
    """
    symbols = list(symbols)
    seq = []
    lines = ["--- Verification (Symbol: Code) ---"]
    for sym in symbols:
        if sym not in codes:
            raise CodeLookupError(sym)
        lines.append(f"{sym} : {codes[sym]}")
        seq.append(codes[sym])

    lines.append("")
    lines.append("Output Sequence (Preorder Traversal of Codes):")
    lines.append("  ".join(seq))
    return lines

def format_code_table(table: TableLike, codes: Dict[Hashable, str]) -> List[str]:
    """Таблица кодов: символ, частота, код, длина."""
    rows = [(str(sym), str(freq), codes.get(sym, "-"), str(len(codes.get(sym, ""))))
            for sym, freq in normalize_table(table)]

    header = ("Symbol", "Freq", "Code", "Len")
    widths = [max(len(header[i]), *(len(r[i]) for r in rows)) for i in range(4)]

    lines = ["  ".join(h.ljust(w) for h, w in zip(header, widths)).rstrip()]
    lines.append("  ".join("-" * w for w in widths))
    for r in rows:
        lines.append("  ".join(c.ljust(w) for c, w in zip(r, widths)).rstrip())
    return lines
