"""Registry of special forms for the Linsl evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before evaluating a list head, so these names
always win over any binding.
"""

from linsl.types.symbol import Symbol
from linsl.evaluation.special_forms.define_form import define_form
from linsl.evaluation.special_forms.if_form import if_form
from linsl.evaluation.special_forms.lambda_form import lambda_form, macro_form
from linsl.evaluation.special_forms.quote_form import quote_form

SPECIAL_FORMS = {
    Symbol("define"): define_form,
    Symbol("if"): if_form,
    Symbol("lambda"): lambda_form,
    Symbol("macro"): macro_form,
    Symbol("quote"): quote_form,
}
