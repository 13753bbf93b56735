from glossa.nodes import Branch, Leaf, Opaque, to_node


def test_string_becomes_leaf():
    assert to_node("hello") == Leaf("hello")


def test_string_keyed_mapping_becomes_branch():
    node = to_node({"a": {"b": "x"}, "n": 1})

    assert node == Branch(
        {"a": Branch({"b": Leaf("x")}), "n": Opaque(1)}
    )


def test_other_values_are_opaque():
    for raw in (1, 2.5, True, None, ["a", "b"]):
        assert to_node(raw) == Opaque(raw)


def test_mapping_with_non_string_keys_is_opaque():
    # e.g. YAML "1: one"
    assert isinstance(to_node({1: "one", "two": "2"}), Opaque)


def test_deep_nesting_does_not_hit_recursion_limit():
    raw = "bottom"
    for _ in range(5000):
        raw = {"k": raw}

    node = to_node(raw)

    depth = 0
    while isinstance(node, Branch):
        node = node.children["k"]
        depth += 1
    assert depth == 5000
    assert node == Leaf("bottom")


def test_branch_children_keep_document_order():
    node = to_node({"z": "1", "a": "2", "m": "3"})

    assert list(node.children) == ["z", "a", "m"]
