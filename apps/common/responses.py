from rest_framework.response import Response


def envelope(message, data=None, status_code=200, success=None):
    """
    Build the uniform ``{success, message, statusCode, data}`` response.

    ``success`` defaults to True for 2xx status codes.
    """
    if success is None:
        success = 200 <= status_code < 300

    body = {
        'success': success,
        'message': message,
        'statusCode': status_code,
    }
    if data is not None:
        body['data'] = data

    return Response(body, status=status_code)
