from stacknt.reader.tokenizer import tokenize
from stacknt.reader.parser import parse, parse_token

__all__ = ["tokenize", "parse", "parse_token"]
