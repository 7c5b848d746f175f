import unittest

from cqlab.registry import Registry


class TestRegistry(unittest.TestCase):
    """Test the Registry class."""

    def test_register_and_create(self):
        """Registered classes should be creatable by key."""
        registry = Registry("test")

        @registry.register("foo")
        class Foo:
            pass

        self.assertIsInstance(registry.create("foo"), Foo)

    def test_register_with_kwargs(self):
        """Create should pass kwargs to constructor."""
        registry = Registry("test")

        @registry.register("bar")
        class Bar:
            def __init__(self, value):
                self.value = value

        self.assertEqual(registry.create("bar", value=42).value, 42)

    def test_registry_has_no_separate_lookup(self):
        """Lookup goes through create(); classes are not handed out directly."""
        self.assertFalse(hasattr(Registry("test"), "get"))

    def test_keys_in_registration_order(self):
        registry = Registry("test")

        @registry.register("b")
        class B:
            pass

        @registry.register("a")
        class A:
            pass

        self.assertEqual(registry.keys(), ["b", "a"])
        self.assertEqual(len(registry), 2)

    def test_unknown_key_raises_keyerror(self):
        """Unknown keys should raise KeyError listing what is available."""
        registry = Registry("test")

        @registry.register("known")
        class Known:
            pass

        with self.assertRaises(KeyError) as ctx:
            registry.create("nonexistent")

        self.assertIn("nonexistent", str(ctx.exception))
        self.assertIn("known", str(ctx.exception))

    def test_duplicate_key_raises_valueerror(self):
        """Registering duplicate key should raise ValueError."""
        registry = Registry("test")

        @registry.register("dup")
        class First:
            pass

        with self.assertRaises(ValueError) as ctx:
            @registry.register("dup")
            class Second:
                pass

        self.assertIn("First", str(ctx.exception))

    def test_contains(self):
        registry = Registry("test")

        @registry.register("exists")
        class Exists:
            pass

        self.assertIn("exists", registry)
        self.assertNotIn("missing", registry)


class TestRendererRegistry(unittest.TestCase):
    """The shared renderer registry should offer every output format."""

    def test_formats_registered(self):
        from cqlab.renderers import renderer_registry

        for key in ("ascii", "csv", "html"):
            self.assertIn(key, renderer_registry)


if __name__ == "__main__":
    unittest.main()
