import argparse

from Huffman import Huffman
from Analytics import compute_stats, format_stats, format_codes, format_code_table
from Config import Config
from utils import parse_table_tokens

# =================================================================================================================

def init() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="huffman-report",
        description="Huffman code table and compression analytics for a symbol/frequency table"
    )
    sub = parser.add_subparsers(dest="cmd")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-t", "--table", nargs="+", metavar="SYM:FREQ",
                        help="Таблица частот, например: a:5 b:9 c:12")
    common.add_argument("-c", "--config", help="YAML-файл конфигурации")
    common.add_argument("--precision", type=int, help="Знаков после запятой в аналитике (по умолчанию 4)")
    common.add_argument("--verbose", action="store_true")

    # ------------------------------------------------------------
    # report
    # ------------------------------------------------------------
    r = sub.add_parser("report", parents=[common], help="Таблица кодов и статистика")
    r.set_defaults(func=report_mode)

    # ------------------------------------------------------------
    # verify
    # ------------------------------------------------------------
    v = sub.add_parser("verify", parents=[common], help="Статистика и проверочный вывод кодов")
    v.add_argument("-s", "--sequence", nargs="+",
                   help="Последовательность символов (строка или символы через пробел)")
    v.set_defaults(func=verify_mode)

    # ------------------------------------------------------------
    # encode
    # ------------------------------------------------------------
    e = sub.add_parser("encode", parents=[common], help="Закодировать последовательность символов")
    e.add_argument("-s", "--sequence", nargs="+", required=True)
    e.set_defaults(func=encode_mode)

    return parser

# =================================================================================================================

def load_config(args) -> Config:
    """Собирает конфигурацию: YAML-файл, поверх него флаги командной строки."""
    cfg = Config.load(args.config) if args.config else Config()

    if args.table:
        cfg.table = parse_table_tokens(args.table)
        # последовательность из файла относится к другой таблице
        cfg.sequence = None
    if args.precision is not None:
        cfg.precision = args.precision
        cfg._validate()
    if args.verbose:
        cfg.verbose = True
    if getattr(args, "sequence", None):
        cfg.sequence = _parse_sequence(args.sequence)

    return cfg

def _parse_sequence(tokens):
    # одна строка "abcdef" - посимвольно, иначе каждый токен - символ
    if len(tokens) == 1:
        return tuple(tokens[0])
    return tuple(tokens)

def _build(cfg: Config) -> Huffman:
    if cfg.verbose:
        print(f"[build] {len(cfg.table)} symbols, total weight {sum(f for _, f in cfg.table)}")
    huffman = Huffman()
    huffman.build(cfg.table)
    if cfg.verbose:
        print(f"[build] code lengths: {huffman.code_lengths()}")
    return huffman

# =================================================================================================================

def report_mode(args) -> int:
    """Печатает таблицу кодов и аналитику сжатия."""
    cfg = load_config(args)
    huffman = _build(cfg)

    for line in format_code_table(cfg.table, huffman.codes):
        print(line)
    print()
    for line in format_stats(compute_stats(cfg.table, huffman.codes, cfg.verbose), cfg.precision):
        print(line)
    return 0

def verify_mode(args) -> int:
    """Печатает аналитику, затем коды символов последовательности и их конкатенацию."""
    cfg = load_config(args)
    huffman = _build(cfg)

    print()
    for line in format_stats(compute_stats(cfg.table, huffman.codes, cfg.verbose), cfg.precision):
        print(line)
    for line in format_codes(cfg.display_sequence(), huffman.codes):
        print(line)
    return 0

def encode_mode(args) -> int:
    """Кодирует последовательность и проверяет, что она однозначно декодируется обратно."""
    cfg = load_config(args)
    huffman = _build(cfg)

    symbols = cfg.display_sequence()
    bits = huffman.encode(symbols)
    print(bits)

    decoded = tuple(huffman.decode(bits))
    if cfg.verbose:
        print(f"[encode] {len(symbols)} symbols -> {len(bits)} bits, decode ok: {decoded == symbols}")
    if decoded != symbols:
        raise RuntimeError("decoded sequence does not match the input")
    return 0
