import pytest

from coursekit.filesystem import (
    FSNode,
    compute_total_size,
    create_file,
    create_folder,
    format_structure,
    print_structure,
)


@pytest.fixture
def tree():
    root = create_folder("root")
    a = create_file("a.txt", 100)
    sub = create_folder("sub")
    b = create_file("b.txt", 50)
    root.add_child(a)
    root.add_child(sub)
    sub.add_child(b)
    return root, a, sub, b


def test_create_file_and_folder():
    f = create_file("notes.txt", 42)
    d = create_folder("docs")
    assert (f.name, f.size, f.parent, f.children) == ("notes.txt", 42, None, [])
    assert (d.name, d.size, d.children) == ("docs", 0, [])
    assert d.is_dir and not f.is_dir


def test_add_child_sets_parent_and_keeps_order(tree):
    root, a, sub, b = tree
    assert root.children == [a, sub]
    assert a.parent is root
    assert b.parent is sub
    assert list(sub) == [b]


def test_compute_total_size_sums_nested_files(tree):
    root, a, sub, b = tree
    assert compute_total_size(root) == a.size + b.size
    assert compute_total_size(sub) == b.size


def test_compute_total_size_of_none_and_empty():
    assert compute_total_size(None) == 0
    assert compute_total_size(create_folder("empty")) == 0


def test_compute_total_size_of_file_counts_no_children():
    assert compute_total_size(create_file("x", 10)) == 0


def test_format_structure(tree):
    root, *_ = tree
    assert format_structure(root) == (
        "[DIR] root\n"
        "  a.txt (100)\n"
        "  [DIR] sub\n"
        "    b.txt (50)\n"
    )


def test_format_structure_with_indent(tree):
    _, _, sub, _ = tree
    assert format_structure(sub, 1) == "  [DIR] sub\n    b.txt (50)\n"


def test_format_structure_none():
    assert format_structure(None) == ""


def test_print_structure_matches_format(tree, capsys):
    root, *_ = tree
    print_structure(root)
    assert capsys.readouterr().out == format_structure(root)


def test_nodes_compare_by_identity():
    first = FSNode("same", 1)
    second = FSNode("same", 1)
    assert first != second
    assert first == first