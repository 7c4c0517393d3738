import pytest
from pydantic import ValidationError

from dactyl_oas.generator.arguments import project_arguments
from dactyl_oas.generator.models import Parameter, ParameterSchema, SpecDocument, Info
from dactyl_oas.metadata.base import (
    ArgsType,
    ControllerMetadata,
    HttpMethod,
    RouteArgument,
    RouteDefinition,
)


class TestControllerMetadata:
    def test_accepts_camel_case_names(self):
        meta = ControllerMetadata.model_validate({
            "prefix": "/users",
            "routes": [{"methodName": "getUser", "path": "/:id", "requestMethod": "GET"}],
            "defaultResponseCodes": {"getUser": 202},
            "args": [{"argFor": "getUser", "type": "param", "key": "id"}],
            "argTypes": {"getUser": ["string"]},
        })
        assert meta.routes[0].method_name == "getUser"
        assert meta.routes[0].request_method is HttpMethod.GET
        assert meta.default_response_codes == {"getUser": 202}
        assert meta.args[0].type is ArgsType.PARAM

    def test_optional_fields_default_empty(self):
        meta = ControllerMetadata(routes=[])
        assert meta.prefix is None
        assert meta.docs == ()
        assert meta.args == ()
        assert meta.arg_types == {}

    def test_routes_are_required(self):
        with pytest.raises(ValidationError):
            ControllerMetadata(prefix="/users")

    def test_duplicate_method_names_rejected(self):
        route = RouteDefinition(method_name="ping", path="", request_method=HttpMethod.GET)
        with pytest.raises(ValidationError, match="duplicate route"):
            ControllerMetadata(prefix="/x", routes=[route, route])

    def test_unknown_request_method_rejected(self):
        with pytest.raises(ValidationError):
            RouteDefinition(method_name="x", path="", request_method="FETCH")

    def test_metadata_is_frozen(self):
        arg = RouteArgument(arg_for="x", type=ArgsType.QUERY, key="q")
        with pytest.raises(ValidationError):
            arg.key = "other"


class TestSpecDocument:
    def test_parameter_uses_openapi_field_names(self):
        doc = SpecDocument(
            openapi="3.0.0",
            info=Info(title="t", version="1", description="d"),
            paths={},
        )
        p = Parameter(name="id", location="path", schema_=ParameterSchema(type="string"))
        assert p.model_dump(by_alias=True) == {
            "name": "id",
            "in": "path",
            "schema": {"type": "string"},
        }
        assert list(doc.to_dict()) == ["openapi", "info", "paths", "components"]

    def test_missing_schema_type_is_omitted(self):
        doc = SpecDocument.model_validate({
            "openapi": "3.0.0",
            "info": {"title": "t", "version": "1", "description": "d"},
            "paths": {"/a": {"GET": {
                "description": "a",
                "responses": {"200": {"description": ""}},
                "parameters": [{"name": "q", "in": "query", "schema": {}}],
            }}},
        })
        param = doc.to_dict()["paths"]["/a"]["GET"]["parameters"][0]
        assert param == {"name": "q", "in": "query", "schema": {}}

    def test_components_sections(self):
        doc = SpecDocument(openapi="3.0.0", info=Info(title="t", version="1", description="d"))
        assert list(doc.to_dict()["components"]) == [
            "schemas", "responses", "parameters", "examples", "requestBodies",
            "headers", "securitySchemes", "links", "callbacks",
        ]


class TestLabelSpelling:
    def test_upper_case_arg_type_projects_to_path(self):
        meta = ControllerMetadata.model_validate({
            "prefix": "/users",
            "routes": [{"methodName": "getUser", "path": "/:id", "requestMethod": "GET"}],
            "args": [{"argFor": "getUser", "type": "PARAM", "key": "id"}],
            "argTypes": {"getUser": ["string"]},
        })
        assert meta.args[0].type is ArgsType.PARAM
        [param] = project_arguments(meta.args, "getUser", meta.arg_types["getUser"])
        assert param.model_dump(by_alias=True) == {
            "name": "id",
            "in": "path",
            "schema": {"type": "string"},
        }

    def test_upper_case_query_keeps_lower_case_location(self):
        arg = RouteArgument(arg_for="x", type="QUERY", key="q")
        assert arg.type is ArgsType.QUERY
        assert arg.type.value == "query"

    def test_lower_case_request_method(self):
        route = RouteDefinition(method_name="x", path="", request_method="post")
        assert route.request_method is HttpMethod.POST


class TestReadOnlyMetadata:
    def test_sequences_cannot_grow(self):
        meta = ControllerMetadata(
            prefix="/x",
            routes=[RouteDefinition(method_name="a", path="", request_method="GET")],
        )
        assert isinstance(meta.routes, tuple)
        with pytest.raises(AttributeError):
            meta.routes.append(meta.routes[0])

    def test_mappings_cannot_be_assigned(self):
        meta = ControllerMetadata.model_validate({
            "prefix": "/x",
            "routes": [],
            "defaultResponseCodes": {"a": 204},
            "argTypes": {"a": ["string"]},
        })
        with pytest.raises(TypeError):
            meta.arg_types["b"] = ("integer",)
        with pytest.raises(TypeError):
            meta.default_response_codes["a"] = 200
        assert meta.arg_types["a"] == ("string",)

    def test_default_mappings_are_read_only(self):
        meta = ControllerMetadata(prefix="/x", routes=[])
        with pytest.raises(TypeError):
            meta.default_response_codes["a"] = 200
