from __future__ import annotations

from collections import OrderedDict, deque
from unittest import TestCase

from saxon_options import (
    ConfigurationError,
    ErrorCode,
    Feature,
    ImportlibClassResolver,
    PropertyConfiguration,
    RecoveryPolicy,
    SaxonOptions,
    TreeModel,
    prepare_saxon_configuration,
)


class ImportlibClassResolverTests(TestCase):
    def test_dotted_name_is_instantiated(self) -> None:
        instance = ImportlibClassResolver().resolve("collections.OrderedDict")

        self.assertIsInstance(instance, OrderedDict)

    def test_colon_separated_name_is_instantiated(self) -> None:
        instance = ImportlibClassResolver().resolve("collections:deque")

        self.assertIsInstance(instance, deque)

    def test_each_resolution_returns_a_new_instance(self) -> None:
        resolver = ImportlibClassResolver()

        first = resolver.resolve("collections.OrderedDict")
        second = resolver.resolve("collections.OrderedDict")

        self.assertIsNot(first, second)

    def test_unqualified_name_is_not_found(self) -> None:
        with self.assertRaises(ConfigurationError) as ctx:
            ImportlibClassResolver().resolve("OrderedDict")

        self.assertIs(ctx.exception.code, ErrorCode.CLASS_NOT_FOUND)

    def test_missing_module_is_not_found(self) -> None:
        with self.assertRaises(ConfigurationError) as ctx:
            ImportlibClassResolver().resolve("saxon_options_missing_module.Finder")

        self.assertIs(ctx.exception.code, ErrorCode.CLASS_NOT_FOUND)
        self.assertIsInstance(ctx.exception.__cause__, ImportError)

    def test_missing_attribute_is_not_found(self) -> None:
        with self.assertRaises(ConfigurationError) as ctx:
            ImportlibClassResolver().resolve("collections.NoSuchFinder")

        self.assertIs(ctx.exception.code, ErrorCode.CLASS_NOT_FOUND)
        self.assertIsInstance(ctx.exception.__cause__, AttributeError)

    def test_non_class_attribute_is_not_instantiable(self) -> None:
        with self.assertRaises(ConfigurationError) as ctx:
            ImportlibClassResolver().resolve("os.path.join")

        self.assertIs(ctx.exception.code, ErrorCode.CLASS_NOT_INSTANTIABLE)

    def test_failing_constructor_is_not_instantiable(self) -> None:
        with self.assertRaises(ConfigurationError) as ctx:
            ImportlibClassResolver().resolve("datetime.date")

        self.assertIs(ctx.exception.code, ErrorCode.CLASS_NOT_INSTANTIABLE)
        self.assertIsInstance(ctx.exception.__cause__, TypeError)

    def test_capability_is_checked(self) -> None:
        resolver = ImportlibClassResolver(capability=dict)

        self.assertIsInstance(resolver.resolve("collections.OrderedDict"), dict)
        with self.assertRaises(ConfigurationError) as ctx:
            resolver.resolve("collections.deque")

        self.assertIs(ctx.exception.code, ErrorCode.CLASS_WRONG_CAPABILITY)


class PropertyConfigurationTests(TestCase):
    def test_properties_overwrite_previous_values(self) -> None:
        config = PropertyConfiguration()

        config.set_property(Feature.TREE_MODEL, TreeModel.TINY_TREE)
        config.set_property(Feature.TREE_MODEL, TreeModel.LINKED_TREE)

        self.assertEqual(config.properties, {Feature.TREE_MODEL: TreeModel.LINKED_TREE})
        self.assertIsNone(config.get_property(Feature.XINCLUDE))
        self.assertEqual(config.get_property(Feature.XINCLUDE, False), False)

    def test_raw_feature_uri_is_accepted(self) -> None:
        config = PropertyConfiguration()

        config.set_property(Feature.LINE_NUMBERING.value, True)  # type: ignore[arg-type]

        self.assertIs(config.get_property(Feature.LINE_NUMBERING), True)

    def test_applying_the_same_record_twice_is_idempotent(self) -> None:
        options = SaxonOptions(
            xinclude="on",
            warnings="silent",
            collection_finder_class="collections.OrderedDict",
            optimization_level="10",
            output_validation="strict",
        )
        config = PropertyConfiguration()

        prepare_saxon_configuration(config, options)
        first = dict(config.properties)
        prepare_saxon_configuration(config, options)

        self.assertEqual(config.properties, first)
        self.assertEqual(
            config.get_property(Feature.RECOVERY_POLICY),
            RecoveryPolicy.RECOVER_SILENTLY,
        )
        self.assertIsInstance(config.get_property(Feature.COLLECTION_FINDER), OrderedDict)

    def test_resolution_failure_surfaces_from_translation(self) -> None:
        config = PropertyConfiguration()

        with self.assertRaises(ConfigurationError) as ctx:
            prepare_saxon_configuration(
                config,
                SaxonOptions(
                    xinclude="off",
                    output_uri_resolver_class="collections.Missing",
                    uri_resolver_class="a.Resolver",
                ),
            )

        self.assertIs(ctx.exception.code, ErrorCode.CLASS_NOT_FOUND)
        self.assertEqual(ctx.exception.option, "output-uri-resolver-class")
        self.assertEqual(config.properties, {Feature.XINCLUDE: False})

    def test_custom_resolver_is_used(self) -> None:
        resolved: list[str] = []

        class StubResolver:
            def resolve(self, name: str) -> object:
                resolved.append(name)
                return name.upper()

        config = PropertyConfiguration(resolver=StubResolver())

        prepare_saxon_configuration(
            config, SaxonOptions(collection_finder_class="my.finder")
        )

        self.assertEqual(resolved, ["my.finder"])
        self.assertEqual(config.get_property(Feature.COLLECTION_FINDER), "MY.FINDER")

    def test_relative_module_name_is_not_found(self) -> None:
        with self.assertRaises(ConfigurationError) as ctx:
            PropertyConfiguration().get_instance("..relative.Finder")

        self.assertIs(ctx.exception.code, ErrorCode.CLASS_NOT_FOUND)
        self.assertIsInstance(ctx.exception.__cause__, TypeError)
