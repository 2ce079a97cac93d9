import re

import yaml

import openapi
from main import app


def test_schema_has_gateway_integration():
    schema = openapi.build_openapi_schema(app, lambda_arn="arn:aws:lambda:us-east-1:123:function:web-reader")

    assert schema["openapi"] == "3.0.0"
    assert schema["info"]["title"] == "Web Reader API"
    post = schema["paths"]["/analisar"]["post"]
    assert post["x-amazon-apigateway-integration"] == {
        "uri": "arn:aws:lambda:us-east-1:123:function:web-reader",
        "httpMethod": "POST",
        "type": "aws_proxy",
    }
    assert all(r["content"] == {"application/json": {}} for r in post["responses"].values())


def test_schema_names_are_alphanumeric():
    schema = openapi.build_openapi_schema(app)

    names = schema["components"]["schemas"]
    assert "AnalysisRequest" in names
    assert all(re.fullmatch(r"[A-Za-z0-9]+", name) for name in names)


def test_app_schema_is_left_untouched():
    openapi.build_openapi_schema(app)

    assert app.openapi()["openapi"] != "3.0.0"


def test_main_writes_yaml(tmp_path):
    path = tmp_path / "openapi.yaml"

    openapi.main(str(path))

    with open(path) as f:
        dumped = yaml.safe_load(f)
    assert "/analisar" in dumped["paths"]
