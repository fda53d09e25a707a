from pathlib import Path

from modelq.shared.errors import (
    DestinationUnavailableError,
    EmissionError,
    EmissionPhase,
    ErrorKind,
    GenerationError,
    OutputDirectoryError,
    SchemaError,
    SchemaValidationError,
    TaskFailedError,
)


class TestSchemaError:
    def test_init_no_path(self):
        error = SchemaError("test message")
        assert str(error) == "test message"
        assert error.schema_path is None

    def test_init_with_path(self):
        error = SchemaError("test message", "path/to/schema.yaml")
        assert str(error) == "[path/to/schema.yaml] test message"
        assert error.schema_path == "path/to/schema.yaml"


class TestSchemaValidationError:
    def test_init_no_field_no_path(self):
        error = SchemaValidationError("validation failed")
        assert str(error) == "validation failed"
        assert error.field is None
        assert error.schema_path is None

    def test_init_with_field_and_path(self):
        error = SchemaValidationError("invalid value", "schema.yaml", "users.id")
        assert str(error) == "[schema.yaml] Field 'users.id': invalid value"
        assert error.field == "users.id"
        assert isinstance(error, SchemaError)


class TestOutputDirectoryError:
    def test_init(self):
        cause = PermissionError("denied")
        error = OutputDirectoryError(Path("models"), cause)
        assert str(error) == "Cannot prepare output directory 'models': denied"
        assert error.path == Path("models")
        assert error.cause is cause


class TestDestinationUnavailableError:
    def test_init(self):
        cause = IsADirectoryError("is a directory")
        error = DestinationUnavailableError("orders", Path("models/orders.go"), cause)
        assert str(error) == (
            "[orders] Cannot open 'models/orders.go' for writing: is a directory"
        )
        assert error.table_name == "orders"
        assert error.destination == Path("models/orders.go")
        assert error.kind is ErrorKind.DESTINATION_UNAVAILABLE
        assert isinstance(error, GenerationError)


class TestEmissionError:
    def test_init(self):
        error = EmissionError("users", EmissionPhase.MODEL_STRUCT, OSError("disk full"))
        assert str(error) == "[users] Error when writing the model struct into file: disk full"
        assert error.phase is EmissionPhase.MODEL_STRUCT
        assert error.kind is ErrorKind.EMISSION_FAILED

    def test_phase_names(self):
        assert [phase.value for phase in EmissionPhase] == [
            "header",
            "model struct",
            "footer",
        ]


class TestTaskFailedError:
    def test_init(self):
        error = TaskFailedError("users", RuntimeError("boom"))
        assert str(error) == "[users] Unexpected failure: RuntimeError('boom')"
        assert error.kind is ErrorKind.UNEXPECTED
