"""
Usage examples for fetch_request.
"""
from fetch_request import MediaType, RequestBuilder


def example_json_post():
    print("--- JSON POST ---")
    request = (
        RequestBuilder.create_post("https://api.example.com/items/{id}")
        .with_path_param("id", "7")
        .with_query_param("verbose", "true")
        .with_bearer_auth("sk-123456")
        .accepts(MediaType.APPLICATION_JSON)
        .with_json_body({"n": 1})
        .build()
    )
    print(f"Request: {request.to_dict()}")
    # url: https://api.example.com/items/7?verbose=true


def example_form_post():
    print("\n--- Form POST ---")
    request = (
        RequestBuilder.create_post("https://auth.example.com/oauth/token")
        .with_basic_auth("client-id", "client-secret")
        .with_form_params({"grant_type": "client_credentials", "scope": ["read", "write"]})
        .build()
    )
    print(f"Headers: {dict(request.headers)}")
    print(f"Body: {request.body!r}")
    # b'grant_type=client_credentials&scope=read&scope=write'


def example_multi_value_query():
    print("\n--- Multi-value query ---")
    request = (
        RequestBuilder.create_get("https://api.example.com/search")
        .with_query_param("tag", ["a b", "c&d"])
        .with_query_param("page", "")
        .build()
    )
    print(f"URL: {request.url}")
    # https://api.example.com/search?tag=a%20b&tag=c%26d


if __name__ == "__main__":
    example_json_post()
    example_form_post()
    example_multi_value_query()
