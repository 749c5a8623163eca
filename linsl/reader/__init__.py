from linsl.reader.tokenizer import Token, Tokenizer, lex_line
from linsl.reader.parser import Parser, parse, read_all, expand_quasiquote
