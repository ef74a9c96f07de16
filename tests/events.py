"""API Gateway event factories shared by the tests."""


def rest_event(claims=None):
    """REST API proxy event as delivered behind a Cognito user pool authorizer."""
    return {
        "resource": "/test",
        "path": "/test",
        "httpMethod": "GET",
        "headers": {},
        "multiValueHeaders": {},
        "queryStringParameters": None,
        "pathParameters": None,
        "stageVariables": None,
        "body": None,
        "isBase64Encoded": False,
        "requestContext": {
            "accountId": "123",
            "apiId": "abc",
            "authorizer": {"claims": claims} if claims is not None else None,
            "httpMethod": "GET",
            "identity": {},
            "path": "/test",
            "protocol": "HTTP/1.1",
            "requestId": "req",
            "requestTimeEpoch": 0,
            "resourceId": "res",
            "resourcePath": "/test",
            "stage": "dev",
        },
    }


def http_event(claims=None):
    """HTTP API (payload v2) event as delivered behind a JWT authorizer."""
    authorizer = None
    if claims is not None:
        scope = claims.get("scope") if isinstance(claims, dict) else None
        authorizer = {
            "jwt": {
                "claims": claims,
                "scopes": scope.split(" ") if isinstance(scope, str) else None,
            }
        }
    return {
        "version": "2.0",
        "routeKey": "$default",
        "rawPath": "/test",
        "rawQueryString": "",
        "headers": {},
        "isBase64Encoded": False,
        "requestContext": {
            "accountId": "123",
            "apiId": "api",
            "authorizer": authorizer,
            "domainName": "example.com",
            "domainPrefix": "api",
            "http": {
                "method": "GET",
                "path": "/test",
                "protocol": "HTTP/1.1",
                "sourceIp": "127.0.0.1",
                "userAgent": "pytest",
            },
            "requestId": "req",
            "routeKey": "$default",
            "stage": "$default",
            "time": "",
            "timeEpoch": 0,
        },
    }
