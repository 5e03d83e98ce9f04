
from heapq import heappush, heappop
from typing import Dict, Hashable, Iterable, List, Optional

from utils import *

"""Кодирование Хаффмана для фиксированного алфавита с известными частотами.

Поддерживает:
    - построение дерева Хаффмана жадным слиянием двух узлов минимального веса
    - вывод кодов обходом дерева в глубину (влево '0', вправо '1')
    - кодирование и декодирование последовательностей символов по полученной таблице

Разбиение равных весов:
    узлы одинакового веса извлекаются из кучи в порядке создания. Листья создаются
    в порядке входной таблицы, внутренние узлы получают следующий номер в момент слияния,
    поэтому одна и та же таблица всегда даёт одни и те же коды.

API:
    - build_tree(table) -> HuffmanNode
    - generate_codes(root) -> {символ: код}
    - Huffman(): класс с методами build/encode/decode.
"""

class HuffmanNode:
    """Узел дерева Хаффмана.

    Лист хранит символ и его частоту, внутренний узел - только суммарный вес потомков.
    """
    __slots__ = ("symbol", "weight", "left", "right")

    def __init__(self, symbol: Hashable, weight: int,
                 left: Optional["HuffmanNode"] = None, right: Optional["HuffmanNode"] = None):
        self.symbol = symbol
        self.weight = weight
        self.left = left
        self.right = right

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf:
            return f"HuffmanNode({self.symbol!r}, {self.weight})"
        return f"HuffmanNode(<internal>, {self.weight})"

# -------------------------------------------------------------------------------------------------

def build_tree(table: TableLike) -> HuffmanNode:
    """Строит дерево Хаффмана по таблице частот.

    Args:
        table (TableLike): Пары (символ, частота) или словарь {символ: частота}.

    Raises:
        FrequencyTableError: Таблица пуста, частота <= 0 или символ повторяется.

    Returns:
        HuffmanNode: Корень дерева. Для таблицы из одного символа корень - внутренний
        узел с единственным левым потомком, чтобы код символа не был пустым.
    """
    table = normalize_table(table)

    # элемент кучи: (вес, порядковый_номер, узел)
    heap = []
    uniq_id = 0

    for sym, w in table:
        heappush(heap, (w, uniq_id, HuffmanNode(sym, w)))
        uniq_id += 1

    if len(heap) == 1:
        _, _, leaf = heap[0]
        return HuffmanNode(None, leaf.weight, left=leaf)

    while len(heap) > 1:
        w1, _, n1 = heappop(heap)
        w2, _, n2 = heappop(heap)

        heappush(heap, (w1 + w2, uniq_id, HuffmanNode(None, w1 + w2, left=n1, right=n2)))
        uniq_id += 1

    _, _, root = heap[0]
    return root

def generate_codes(root: HuffmanNode) -> Dict[Hashable, str]:
    """Выводит коды символов прямым обходом дерева в глубину.

    Код листа - путь от корня: шаг влево добавляет '0', шаг вправо '1'.
    Обход идёт по явному стеку, глубина дерева не ограничена лимитом рекурсии.
    Дерево не изменяется.

    Returns:
        Dict[Hashable, str]: {символ: код} в порядке обхода (левые ветви раньше правых).
    """
    # корень-лист возможен только для дерева, собранного вручную
    if root.is_leaf:
        return {root.symbol: "0"}

    codes = {}
    stack = [(root, "")]
    while stack:
        node, path = stack.pop()
        if node.is_leaf:
            codes[node.symbol] = path
            continue
        # правый кладётся первым, чтобы левое поддерево обошлось раньше
        if node.right is not None:
            stack.append((node.right, path + "1"))
        if node.left is not None:
            stack.append((node.left, path + "0"))

    return codes

def iter_leaves(root: HuffmanNode) -> Iterable[HuffmanNode]:
    """Перечисляет листья дерева слева направо."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_leaf:
            yield node
            continue
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)

# -------------------------------------------------------------------------------------------------

class Huffman:
    """Кодек Хаффмана над заданной таблицей частот.

    Атрибуты:
        freqs (Table): Проверенная таблица частот последнего построения.
        codes (Dict[Hashable, str]): Коды символов в порядке входной таблицы.
    """

    def __init__(self):
        """Инициализирует локальные СД
        """
        self.freqs: Table = ()
        self.codes: Dict[Hashable, str] = dict()
        self._decode_table: Dict[str, Hashable] = dict()

    def build(self, table: TableLike) -> Dict[Hashable, str]:
        """Строит кодовую таблицу. Дерево живёт только внутри вызова.

        Raises:
            FrequencyTableError: Некорректная таблица частот; состояние кодека не меняется.

        Returns:
            Dict[Hashable, str]: {символ: код}.
        """
        freqs = normalize_table(table)
        root = build_tree(freqs)

        # сумма весов листьев должна совпасть с суммой частот, иначе аналитика неверна
        leaf_weight = sum(leaf.weight for leaf in iter_leaves(root))
        if leaf_weight != root.weight or root.weight != sum(f for _, f in freqs):
            raise RuntimeError(f"tree weight {root.weight} does not match leaf weight {leaf_weight}")

        tree_codes = generate_codes(root)

        self.freqs = freqs
        self.codes = {sym: tree_codes[sym] for sym, _ in freqs}
        self._decode_table = build_decode_table(self.codes)
        return self.codes

    def code_lengths(self) -> Dict[Hashable, int]:
        return {sym: len(code) for sym, code in self.codes.items()}

    def encode(self, symbols: Iterable[Hashable]) -> str:
        """Кодирует последовательность символов в строку битов.

        Raises:
            CodeLookupError: Символ отсутствует в кодовой таблице.
        """
        out = []
        for sym in symbols:
            try:
                out.append(self.codes[sym])
            except KeyError:
                raise CodeLookupError(sym) from None
        return "".join(out)

    def decode(self, bits: str) -> List[Hashable]:
        """Декодирует строку битов, полученную encode()."""
        return decode_bits(bits, self._decode_table)
