import copy

import yaml
from fastapi import FastAPI


def rename_schemas(openapi_schema: dict) -> dict:
    # API Gateway only accepts alphanumeric model names
    schemas = openapi_schema.get("components", {}).get("schemas")
    if not schemas:
        return openapi_schema

    updated_schemas = {}
    for schema_name, schema_content in schemas.items():
        new_schema_name = schema_name.replace("-", "").replace("_", "")
        updated_schemas[new_schema_name] = schema_content
        if new_schema_name == schema_name:
            continue

        old_ref = f"#/components/schemas/{schema_name}"
        new_ref = f"#/components/schemas/{new_schema_name}"
        for methods in openapi_schema["paths"].values():
            for details in methods.values():
                body_schema = details.get("requestBody", {}).get("content", {}).get("application/json", {}).get("schema", {})
                if body_schema.get("$ref") == old_ref:
                    body_schema["$ref"] = new_ref

                for response in details.get("responses", {}).values():
                    schema = response.get("content", {}).get("application/json", {}).get("schema", {})
                    if schema.get("$ref") == old_ref:
                        schema["$ref"] = new_ref

    openapi_schema["components"]["schemas"] = updated_schemas
    return openapi_schema


def build_openapi_schema(app: FastAPI, lambda_arn: str = "${lambda_arn}") -> dict:
    openapi_schema = rename_schemas(copy.deepcopy(app.openapi()))

    # API Gateway import requires 3.0.x
    openapi_schema["openapi"] = "3.0.0"
    openapi_schema["info"] = {
        "title": "Web Reader API",
        "description": "Word analysis relay for the Web Reader",
        "version": "1.0.0"
    }

    for methods in openapi_schema["paths"].values():
        for details in methods.values():
            details["x-amazon-apigateway-integration"] = {
                "uri": lambda_arn,
                "httpMethod": "POST",
                "type": "aws_proxy"
            }

            for response in details.get("responses", {}).values():
                response["content"] = {
                    "application/json": {}
                }

    return openapi_schema


def main(path: str = "openapi.yaml"):
    from main import app

    openapi_schema = build_openapi_schema(app)
    with open(path, "w") as f:
        yaml.dump(openapi_schema, f, default_flow_style=False)

    print(f"OpenAPI schema has been generated and saved to {path}")


if __name__ == "__main__":
    main()
