from .amount_parser import ParsedAmount, Kind, parse_amount, parse_number, combine_amount_and_unit

__all__ = ["ParsedAmount", "Kind", "parse_amount", "parse_number", "combine_amount_and_unit"]
