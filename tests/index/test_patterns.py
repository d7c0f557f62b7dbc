"""Unit tests for the C# line and file recognizers (patterns.py)."""

from __future__ import annotations

import pytest

from unity_indexer.index.patterns import (
    clean_doc_markup,
    is_annotation_line,
    match_annotation,
    match_class,
    match_doc_comment,
    match_function_declaration,
    match_line_comment,
    match_namespace,
)


class TestDocComment:
    """Tests for match_doc_comment."""

    def test_returns_remainder(self) -> None:
        assert match_doc_comment("    /// Moves the player.") == "Moves the player."

    def test_empty_doc_comment(self) -> None:
        assert match_doc_comment("///") == ""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [("//// Section", "/ Section"), ("//////////", "///////")],
    )
    def test_extra_slashes_are_kept_in_remainder(self, line: str, expected: str) -> None:
        assert match_doc_comment(line) == expected

    @pytest.mark.parametrize("line", ["// plain", "int x; /// trailing", ""])
    def test_non_doc_lines(self, line: str) -> None:
        assert match_doc_comment(line) is None


class TestLineComment:
    """Tests for match_line_comment."""

    def test_returns_remainder(self) -> None:
        assert match_line_comment("\t// Fades the enemy out ") == "Fades the enemy out"

    def test_doc_comment_is_not_a_line_comment(self) -> None:
        assert match_line_comment("/// Summary") is None

    @pytest.mark.parametrize("line", ["//// Section", "//////////"])
    def test_four_or_more_slashes_are_doc_comments(self, line: str) -> None:
        assert match_line_comment(line) is None

    def test_code_is_not_a_comment(self) -> None:
        assert match_line_comment("x = 1; // trailing") is None


class TestAnnotation:
    """Tests for is_annotation_line and match_annotation."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("[SerializeField]", "SerializeField"),
            ('    [Header("Movement")]', "Header"),
            ("[Range(0, 10)]", "Range"),
            ("[field: SerializeField]", "SerializeField"),
            ("[System.Serializable]", "System.Serializable"),
            ('[RequireComponent(typeof(Rigidbody)), DisallowMultipleComponent]', "RequireComponent"),
        ],
    )
    def test_leading_identifier(self, line: str, expected: str) -> None:
        assert match_annotation(line) == expected

    def test_bracketed_without_identifier(self) -> None:
        assert is_annotation_line("[ ]")
        assert match_annotation("[ ]") is None

    @pytest.mark.parametrize(
        "line",
        ["[SerializeField] private int hp;", "int[] values;", "values[0] = 1;", ""],
    )
    def test_not_annotation_lines(self, line: str) -> None:
        assert not is_annotation_line(line)
        assert match_annotation(line) is None


class TestFunctionDeclaration:
    """Tests for match_function_declaration."""

    @pytest.mark.parametrize(
        ("line", "return_type", "name", "params"),
        [
            ("void Update() { }", "void", "Update", ""),
            ("    private void OnTriggerEnter(Collider other)", "void", "OnTriggerEnter", "Collider other"),
            ("    public IEnumerator DoFade(float duration)", "IEnumerator", "DoFade", "float duration"),
            ("    public static List<int> GetAll()", "List<int>", "GetAll", ""),
            ("    public Dictionary<string, int> Map()", "Dictionary<string, int>", "Map", ""),
            ("    protected override string ToString()", "string", "ToString", ""),
            ("    public async Task<bool> LoadAsync(string path)", "Task<bool>", "LoadAsync", "string path"),
            ("    int[] Values()", "int[]", "Values", ""),
            ("    public T Get<T>(int id) where T : Component", "T", "Get", "int id"),
            ("    public int Double(int x) => x * 2;", "int", "Double", "int x"),
            ("    abstract void Hit(int damage);", "void", "Hit", "int damage"),
            ("    UnityEngine.Vector3 Aim()", "UnityEngine.Vector3", "Aim", ""),
            ("    public ref int Slot(int i)", "int", "Slot", "int i"),
        ],
    )
    def test_declarations(self, line: str, return_type: str, name: str, params: str) -> None:
        decl = match_function_declaration(line)
        assert decl is not None
        assert decl.return_type == return_type
        assert decl.name == name
        assert decl.params == params
        assert decl.inline_annotations == ()

    def test_inline_attributes_are_collected(self) -> None:
        decl = match_function_declaration('    [ContextMenu("Reset")] [Button] void ResetStats()')
        assert decl is not None
        assert decl.name == "ResetStats"
        assert decl.inline_annotations == ("ContextMenu", "Button")

    @pytest.mark.parametrize(
        "line",
        [
            "        MovePlayer();",
            "        return Mathf.Max(a, b);",
            "        yield return new WaitForSeconds(1f);",
            "        else if (grounded) Jump();",
            "        else Jump(x);",
            "        throw new ArgumentException(message);",
            "        do Step();",
            "        ref Advance(cursor);",
            "        out Emit(value);",
            "        await LoadAsync(path);",
            "        new GameObject(name);",
            "        int hp = Calc(x);",
            "        if (x) Foo(y);",
            "        foreach (var enemy in enemies)",
            "        using (var stream = Open())",
            "    public PlayerController(int speed)",
            "    public delegate void Died(int id);",
            "    public void Configure(int a,",
            "// void Commented()",
            "",
        ],
    )
    def test_non_declarations(self, line: str) -> None:
        assert match_function_declaration(line) is None


class TestNamespaceAndClass:
    """Tests for whole-file namespace and class detection."""

    def test_block_namespace(self) -> None:
        assert match_namespace("using X;\nnamespace Game.Player\n{\n}") == "Game.Player"

    def test_file_scoped_namespace(self) -> None:
        assert match_namespace("namespace Game.UI;\n") == "Game.UI"

    def test_no_namespace(self) -> None:
        assert match_namespace("public class A {}") is None

    def test_first_namespace_wins(self) -> None:
        text = "namespace First\n{\n}\nnamespace Second\n{\n}\n"
        assert match_namespace(text) == "First"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("public class PlayerController : MonoBehaviour", "PlayerController"),
            ("    public sealed partial class Inventory", "Inventory"),
            ("internal abstract class Weapon", "Weapon"),
            ("public static class MathUtil", "MathUtil"),
            ("[System.Serializable]\npublic class Stats", "Stats"),
            ("class Plain", "Plain"),
        ],
    )
    def test_class_declarations(self, text: str, expected: str) -> None:
        assert match_class(text) == expected

    def test_first_class_wins(self) -> None:
        text = "public class First { }\npublic class Second { }\n"
        assert match_class(text) == "First"

    def test_class_word_inside_comment_ignored(self) -> None:
        text = "/// The class that moves things\npublic class Mover { }\n"
        assert match_class(text) == "Mover"

    def test_no_class(self) -> None:
        assert match_class("public struct Point { }") is None


class TestCleanDocMarkup:
    """Tests for clean_doc_markup."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("<summary>", ""),
            ("</summary>", ""),
            ("<summary>Moves the player.</summary>", "Moves the player."),
            ('<param name="speed">Units per second</param>', "parameter: Units per second"),
            ("<returns>True when grounded</returns>", "returns: True when grounded"),
            ("Plain text", "Plain text"),
        ],
    )
    def test_cleaning(self, text: str, expected: str) -> None:
        assert clean_doc_markup(text) == expected
