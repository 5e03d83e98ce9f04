from typing import Dict, Hashable, Iterable, List, Mapping, Tuple, Union

# =================================================================================================================

class FrequencyTableError(ValueError):
    """Некорректная таблица частот: пустая, с неположительной частотой или повтором символа."""


class CodeLookupError(KeyError):
    """Символ отсутствует в построенной кодовой таблице."""

    def __str__(self):
        return f"symbol {self.args[0]!r} is not in the code table"

# =================================================================================================================

Table = Tuple[Tuple[Hashable, int], ...]
TableLike = Union[Mapping[Hashable, int], Iterable[Tuple[Hashable, int]]]

def normalize_table(table: TableLike) -> Table:
    """Проверяет таблицу частот и приводит её к неизменяемому виду.

    Порядок пар сохраняется: он определяет порядок листьев в куче
    и, как следствие, разбиение одинаковых весов.

    Args:
        table (TableLike): Словарь {символ: частота} или последовательность пар (символ, частота).

    Raises:
        FrequencyTableError: Пустая таблица, частота не целая или <= 0, повтор символа.

    Returns:
        Table: Кортеж пар (символ, частота).

    Пример:
        Вход: {"a": 5, "b": 9}
        Выход: (("a", 5), ("b", 9))
    """
    pairs = table.items() if isinstance(table, Mapping) else table

    result = []
    seen = set()
    for pair in pairs:
        try:
            sym, freq = pair
        except (TypeError, ValueError):
            raise FrequencyTableError(f"expected (symbol, frequency) pair, got {pair!r}") from None

        # bool - подкласс int, но частотой не является
        if isinstance(freq, bool) or not isinstance(freq, int):
            raise FrequencyTableError(f"frequency of {sym!r} must be an integer, got {freq!r}")
        if freq <= 0:
            raise FrequencyTableError(f"frequency of {sym!r} must be positive, got {freq}")
        try:
            hash(sym)
        except TypeError:
            raise FrequencyTableError(f"symbol {sym!r} is not hashable") from None
        if sym in seen:
            raise FrequencyTableError(f"duplicate symbol {sym!r}")

        seen.add(sym)
        result.append((sym, freq))

    if not result:
        raise FrequencyTableError("frequency table is empty")

    return tuple(result)

def parse_table_tokens(tokens: Iterable[str]) -> Table:
    """Разбирает таблицу частот из токенов командной строки вида "символ:частота".

    Разделителем считается последнее двоеточие, поэтому символ ":" задаётся как "::3".

    Пример:
        Вход: ["a:5", "b:9", "::2"]
        Выход: (("a", 5), ("b", 9), (":", 2))
    """
    pairs = []
    for token in tokens:
        sym, sep, freq = token.rpartition(":")
        if not sep or not sym:
            raise FrequencyTableError(f"expected 'symbol:frequency', got {token!r}")
        try:
            pairs.append((sym, int(freq)))
        except ValueError:
            raise FrequencyTableError(f"frequency in {token!r} is not an integer") from None

    return normalize_table(pairs)

# =================================================================================================================

def is_prefix_free(codes: Iterable[str]) -> bool:
    """Проверяет, что ни один код не является префиксом другого.

    После лексикографической сортировки префикс всегда стоит
    непосредственно перед одним из своих продолжений.
    """
    ordered = sorted(codes)
    for prev, cur in zip(ordered, ordered[1:]):
        if cur.startswith(prev):
            return False
    return True

def build_decode_table(codes: Dict[Hashable, str]) -> Dict[str, Hashable]:
    """Обращает кодовую таблицу: {код: символ}.

    Пример:
        Вход: {"a": "0", "b": "10", "c": "11"}
        Выход: {"0": "a", "10": "b", "11": "c"}
    """
    return {code: sym for sym, code in codes.items()}

def decode_bits(bits: str, decode_table: Dict[str, Hashable]) -> List[Hashable]:
    """Декодирует строку битов префиксным кодом.

    Args:
        bits (str): Строка из '0' и '1'.
        decode_table (Dict[str, Hashable]): Таблица {код: символ}.

    Raises:
        ValueError: В строке встречен посторонний символ или остались недекодированные биты.

    Returns:
        List[Hashable]: Раскодированная последовательность символов.
    """
    out = []
    cur = ""
    for bit in bits:
        if bit not in "01":
            raise ValueError(f"unexpected character {bit!r} in bit string")
        cur += bit
        if cur in decode_table:
            out.append(decode_table[cur])
            cur = ""

    if cur:
        raise ValueError(f"{len(cur)} trailing bit(s) do not form a complete code")

    return out
