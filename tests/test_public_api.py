"""Tests for the valschema public API surface.

Verifies that the expected names are importable from the top-level
``valschema`` package and that ``__all__`` matches what is exported.
"""

import valschema


class TestPublicAPIImports:
    def test_conversion_importable(self):
        from valschema import target_to_schema, validation_metadata_to_schemas

        assert callable(validation_metadata_to_schemas)
        assert callable(target_to_schema)

    def test_options_importable(self):
        from valschema import Config, ResolveOptions

        assert ResolveOptions().ref_pointer_prefix == valschema.DEFAULT_REF_POINTER_PREFIX
        assert Config is not None

    def test_metadata_importable(self):
        from valschema import MetadataStorage, validated

        assert MetadataStorage is not None
        assert callable(validated)

    def test_errors_share_base(self):
        from valschema import (
            ConfigError,
            DanglingReferenceError,
            InvalidMetadataError,
            ValschemaError,
        )

        for cls in (ConfigError, DanglingReferenceError, InvalidMetadataError):
            assert issubclass(cls, ValschemaError)


class TestAll:
    def test_all_names_resolve(self):
        for name in valschema.__all__:
            assert hasattr(valschema, name), name

    def test_all_has_no_duplicates(self):
        assert len(valschema.__all__) == len(set(valschema.__all__))

    def test_version(self):
        assert valschema.__version__ == "0.1.0"
