"""Registry of special forms for the jisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application.
"""

from enum import Enum

from jisp.types.symbol import Symbol
from jisp.evaluation.special_forms.begin_form import begin_form
from jisp.evaluation.special_forms.define_form import define_form
from jisp.evaluation.special_forms.lambda_form import lambda_form
from jisp.evaluation.special_forms.if_form import if_form


class SpecialForm(Enum):
    BEGIN = "begin"
    DEFINE = "define"
    LAMBDA = "lambda"
    IF = "if"

    @property
    def symbol(self) -> Symbol:
        return Symbol(self.value)


_HANDLERS = {
    SpecialForm.BEGIN: begin_form,
    SpecialForm.DEFINE: define_form,
    SpecialForm.LAMBDA: lambda_form,
    SpecialForm.IF: if_form,
}

SPECIAL_FORMS = {form.symbol: _HANDLERS[form] for form in SpecialForm}
