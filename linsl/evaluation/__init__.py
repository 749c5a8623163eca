from linsl.evaluation.evaluator import evaluate
from linsl.evaluation.apply import apply, expand_macro
