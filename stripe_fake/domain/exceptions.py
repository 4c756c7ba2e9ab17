from __future__ import annotations

from stripe import InvalidRequestError as StripeInvalidRequestError


class InvalidRequestError(StripeInvalidRequestError):
    """Erro de requisicao invalida, no mesmo formato do SDK da Stripe.

    Herda do erro do SDK para que codigo cliente que captura
    ``stripe.InvalidRequestError`` se comporte igual contra o fake.
    """

    def __init__(self, message: str, param: str, *, code: str | None = None, http_status: int = 400):
        super().__init__(message, param, code=code, http_status=http_status)

    @property
    def message(self) -> str:
        return self.user_message or ""

    def to_dict(self) -> dict:
        return {
            "error": {
                "type": "invalid_request_error",
                "code": self.code,
                "message": self.message,
                "param": self.param,
            }
        }


def missing_param_error(param: str) -> InvalidRequestError:
    return InvalidRequestError(
        f"Missing required param: {param}.",
        param,
        code="parameter_missing",
    )


def no_such_resource_error(resource_type: str, resource_id: str, *, param: str | None = None) -> InvalidRequestError:
    return InvalidRequestError(
        f"No such {resource_type}: {resource_id}",
        param or resource_type,
        code="resource_missing",
        http_status=404,
    )


def invalid_param_error(param: str, reason: str) -> InvalidRequestError:
    return InvalidRequestError(
        f"Invalid {param}: {reason}",
        param,
        code="parameter_invalid",
    )
