"""DRF exception handler keeping framework errors in the ``{"message"}`` shape."""

from rest_framework.views import exception_handler as drf_exception_handler


def exception_handler(exc, context):
    """Delegate to DRF, then rename its ``detail`` key to ``message``.

    Covers the errors DRF raises before a view runs, such as a malformed
    JSON body (400) or an unrouted method (405).
    """
    response = drf_exception_handler(exc, context)
    if response is None or not isinstance(response.data, dict):
        return response
    if "detail" in response.data:
        data = dict(response.data)
        response.data = {"message": data.pop("detail"), **data}
    return response
