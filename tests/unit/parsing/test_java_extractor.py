"""
Java Syntax Extractor Tests

Runs the tree-sitter-java grammar on small sources and checks the
declaration models: packages, class-like declarations, members, line
ranges, and type erasure.
"""

import textwrap

import pytest

from ppmodel.config import Settings
from ppmodel.exceptions import SourceParseError
from ppmodel.parsing import (
    ConstructorSyntax,
    FieldSyntax,
    InitializerSyntax,
    JavaSyntaxExtractor,
    MethodSyntax,
    ParameterSyntax,
    SourceFile,
)
from ppmodel.structure import ElementKind


def parse(code: str, strict: bool = True):
    source = SourceFile.from_content("src/Test.java", textwrap.dedent(code).lstrip("\n"))
    return JavaSyntaxExtractor(Settings(strict_parse=strict)).parse_source(source)


def members_of(unit, kind):
    return [m for decl in unit.type_declarations for m in decl.members if isinstance(m, kind)]


# ============================================================
# Packages & Declarations
# ============================================================


class TestDeclarations:
    def test_package_name(self):
        unit = parse(
            """
            package com.example.util;

            public class Strings {}
            """
        )

        assert unit.package_name == "com.example.util"
        assert unit.file_path == "src/Test.java"

    def test_default_package(self):
        unit = parse("class Main {}")

        assert unit.package_name == ""

    def test_class_interface_enum_kinds(self):
        unit = parse(
            """
            package shapes;

            interface Shape { double area(); }

            enum Color { RED, GREEN }

            class Square implements Shape {
                public double area() { return 1.0; }
            }
            """
        )

        kinds = [(d.name, d.kind) for d in unit.type_declarations]
        assert kinds == [
            ("Shape", ElementKind.INTERFACE),
            ("Color", ElementKind.ENUM),
            ("Square", ElementKind.CLASS),
        ]

    def test_records_are_not_class_like(self):
        unit = parse(
            """
            class Holder {
                record Pair(int a, int b) {
                    int sum() { return a + b; }
                }
            }
            """
        )

        assert [d.name for d in unit.type_declarations] == ["Holder"]
        assert unit.type_declarations[0].members == ()

    def test_nested_declarations_in_pre_order(self):
        unit = parse(
            """
            class Outer {
                static class Inner {
                    enum Mode { ON, OFF }
                }
                interface Callback {}
            }
            """
        )

        names = [d.name for d in unit.type_declarations]
        assert names == ["Outer", "Inner", "Mode", "Callback"]

    def test_line_ranges(self):
        unit = parse(
            """
            package p;

            class Calc {
                int add(int a, int b) {
                    return a + b;
                }
            }
            """
        )

        calc = unit.type_declarations[0]
        assert (calc.start_line, calc.end_line) == (3, 7)
        add = calc.members[0]
        assert (add.start_line, add.end_line) == (4, 6)


# ============================================================
# Members
# ============================================================


class TestMembers:
    def test_members_in_source_order(self):
        unit = parse(
            """
            class Account {
                private long balance;
                Account(long initial) { balance = initial; }
                long balance() { return balance; }
                static { System.loadLibrary("x"); }
                { balance = 0; }
            }
            """
        )

        kinds = [type(m) for m in unit.type_declarations[0].members]
        assert kinds == [FieldSyntax, ConstructorSyntax, MethodSyntax, InitializerSyntax]

    def test_only_static_initializers_are_extracted(self):
        unit = parse(
            """
            class Cache {
                { warm(); }
                static {
                    load();
                }
                { warm(); }
            }
            """
        )

        (block,) = members_of(unit, InitializerSyntax)
        assert (block.start_line, block.end_line) == (3, 5)

    def test_multi_variable_field(self):
        unit = parse(
            """
            class Point {
                int x, y, z;
            }
            """
        )

        (field,) = members_of(unit, FieldSyntax)
        assert field.type == "int"
        assert field.names == ("x", "y", "z")
        assert field.start_line == field.end_line == 2

    def test_field_with_c_style_dimensions_splits(self):
        unit = parse(
            """
            class Grid {
                int size, cells[], count;
            }
            """
        )

        fields = [(f.type, f.names) for f in members_of(unit, FieldSyntax)]
        assert fields == [("int", ("size",)), ("int[]", ("cells",)), ("int", ("count",))]

    def test_interface_constants_are_fields(self):
        unit = parse(
            """
            interface Limits {
                int MAX = 10;
                void check();
            }
            """
        )

        (field,) = members_of(unit, FieldSyntax)
        assert field.names == ("MAX",)
        (method,) = members_of(unit, MethodSyntax)
        assert method.name == "check"
        assert method.return_type == "void"

    def test_enum_body_members(self):
        unit = parse(
            """
            enum Planet {
                EARTH(5.97), MARS(0.642);

                private final double mass;

                Planet(double mass) { this.mass = mass; }

                double mass() { return mass; }
            }
            """
        )

        assert [f.names for f in members_of(unit, FieldSyntax)] == [("mass",)]
        (ctor,) = members_of(unit, ConstructorSyntax)
        assert ctor.parameters == (ParameterSyntax("mass", "double"),)
        assert [m.name for m in members_of(unit, MethodSyntax)] == ["mass"]

    def test_constructor_parameters(self):
        unit = parse(
            """
            class Pair {
                Pair(String left, Object right) {}
            }
            """
        )

        (ctor,) = members_of(unit, ConstructorSyntax)
        assert ctor.name == "Pair"
        assert ctor.parameters == (
            ParameterSyntax("left", "String"),
            ParameterSyntax("right", "Object"),
        )

    def test_method_signature_parts(self):
        unit = parse(
            """
            class Calc {
                int add(int a, int b) { return a + b; }
                void run() {}
            }
            """
        )

        add, run = members_of(unit, MethodSyntax)
        assert add.return_type == "int"
        assert add.parameters == (ParameterSyntax("a", "int"), ParameterSyntax("b", "int"))
        assert add.returns_value is True
        assert run.parameters == ()
        assert run.returns_value is False

    def test_abstract_method_without_body(self):
        unit = parse(
            """
            abstract class Base {
                abstract String name();
            }
            """
        )

        (method,) = members_of(unit, MethodSyntax)
        assert method.name == "name"
        assert method.return_type == "String"


# ============================================================
# Type Erasure
# ============================================================


class TestTypeErasure:
    def erased_params(self, signature: str):
        unit = parse(f"class T {{ void m({signature}) {{}} }}")
        (method,) = members_of(unit, MethodSyntax)
        return [p.type for p in method.parameters]

    def test_primitives(self):
        assert self.erased_params("int a, long b, double c, boolean d, char e") == [
            "int",
            "long",
            "double",
            "boolean",
            "char",
        ]

    def test_generics_are_stripped(self):
        assert self.erased_params("List<String> a, Map<String, List<Integer>> b") == ["List", "Map"]

    def test_qualified_names_are_kept(self):
        assert self.erased_params("java.util.List<String> a, Map.Entry<K, V> e") == [
            "java.util.List",
            "Map.Entry",
        ]

    def test_arrays(self):
        assert self.erased_params("int[] a, String[][] b, List<String>[] c, int d[]") == [
            "int[]",
            "String[][]",
            "List[]",
            "int[]",
        ]

    def test_varargs_become_arrays(self):
        assert self.erased_params("String fmt, Object... args") == ["String", "Object[]"]

    def test_annotations_are_stripped(self):
        assert self.erased_params("@Deprecated String a, final int b") == ["String", "int"]

    def test_type_variables(self):
        unit = parse("class Box<T> { <R> R map(T value) { return null; } }")
        (method,) = members_of(unit, MethodSyntax)

        assert method.return_type == "R"
        assert method.parameters == (ParameterSyntax("value", "T"),)

    def test_generic_return_type(self):
        unit = parse("class Repo { java.util.List<String> names() { return null; } }")
        (method,) = members_of(unit, MethodSyntax)

        assert method.return_type == "java.util.List"


# ============================================================
# Errors
# ============================================================


class TestParseErrors:
    BROKEN = """
        class Broken {
            void run( {
        }
        """

    def test_strict_mode_rejects_syntax_errors(self):
        with pytest.raises(SourceParseError) as exc_info:
            parse(self.BROKEN)

        assert exc_info.value.file_path == "src/Test.java"
        assert "src/Test.java" in str(exc_info.value)

    def test_lenient_mode_keeps_going(self):
        unit = parse(self.BROKEN, strict=False)

        assert unit.file_path == "src/Test.java"

    def test_parse_file_reads_from_disk(self, tmp_path):
        path = tmp_path / "Hello.java"
        path.write_text("package demo;\nclass Hello {}\n", encoding="utf-8")

        unit = JavaSyntaxExtractor(Settings()).parse_file(path)

        assert unit.package_name == "demo"
        assert unit.file_path == str(path)

    def test_undecodable_file_is_parse_error(self, tmp_path):
        path = tmp_path / "Bad.java"
        path.write_bytes(b"class Bad { String s = \"\xff\xfe\"; }")

        with pytest.raises(SourceParseError):
            JavaSyntaxExtractor(Settings()).parse_file(path)

    def test_missing_file_is_parse_error(self, tmp_path):
        with pytest.raises(SourceParseError):
            JavaSyntaxExtractor(Settings()).parse_file(tmp_path / "Nope.java")
