"""Registry of special forms for the Draca evaluator.

SpecialForm is the closed set of reserved keywords. SPECIAL_FORMS maps the
keyword Symbols to handler functions that implement non-standard evaluation
rules; the evaluator consults this table before ordinary function application.
"""

from enum import Enum
from typing import Callable

from draca import Expression, EvaluatorFn
from draca.types.environment import Environment
from draca.types.symbol import Symbol
from draca.evaluation.special_forms.define_form import define_form
from draca.evaluation.special_forms.lambda_form import lambda_form
from draca.evaluation.special_forms.namespace_forms import (
    define_in_namespace_form,
    namespace_symbol_form,
    namespace_as_list_form,
)
from draca.evaluation.special_forms.quote_form import quote_form
from draca.evaluation.special_forms.if_form import if_form
from draca.evaluation.special_forms.let_form import let_form
from draca.evaluation.special_forms.require_form import require_form
from draca.evaluation.special_forms.eval_file_form import eval_file_form
from draca.evaluation.special_forms.deconst_fn_form import deconst_fn_form

SpecialFormHandler = Callable[[list[Expression], Environment, EvaluatorFn], Expression]


class SpecialForm(Enum):
    DEFINE = "define"
    LAMBDA = "lambda"
    DEFINE_IN_NAMESPACE = "define/in-namespace"
    NAMESPACE_SYMBOL = "namespace/symbol"
    NAMESPACE_AS_LIST = "namespace/as-list"
    QUOTE = "quote"
    EVAL_FILE = "eval-file"
    REQUIRE = "require"
    DECONST_FN = "deconst-fn"
    IF = "if"
    LET = "let"

    @property
    def symbol(self) -> Symbol:
        return Symbol(self.value)


HANDLERS: dict[SpecialForm, SpecialFormHandler] = {
    SpecialForm.DEFINE: define_form,
    SpecialForm.LAMBDA: lambda_form,
    SpecialForm.DEFINE_IN_NAMESPACE: define_in_namespace_form,
    SpecialForm.NAMESPACE_SYMBOL: namespace_symbol_form,
    SpecialForm.NAMESPACE_AS_LIST: namespace_as_list_form,
    SpecialForm.QUOTE: quote_form,
    SpecialForm.EVAL_FILE: eval_file_form,
    SpecialForm.REQUIRE: require_form,
    SpecialForm.DECONST_FN: deconst_fn_form,
    SpecialForm.IF: if_form,
    SpecialForm.LET: let_form,
}

SPECIAL_FORMS: dict[Symbol, SpecialFormHandler] = {
    form.symbol: HANDLERS[form] for form in SpecialForm
}
