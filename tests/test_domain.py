from troubleshooting_guide.domain.models import DecisionNode, DecisionOption, is_terminal
from troubleshooting_guide.navigation import DecisionTreeNavigator


def test_flagged_node_without_options_is_terminal():
    node = DecisionNode(id="end", question="Done", is_terminal=True, solution="Ship it back.")
    assert is_terminal(node)


def test_single_inline_solution_option_is_terminal():
    node = DecisionNode(
        id="n",
        question="Any damage?",
        options=[DecisionOption(id="o", text="Yes", solution="Replace the cord.")],
    )
    assert is_terminal(node)


def test_node_where_every_option_transitions_is_not_terminal(hair_dryer_tree):
    assert not is_terminal(hair_dryer_tree.nodes["initial-problem"])
    assert not is_terminal(hair_dryer_tree.nodes["power-troubleshoot"])


def test_mixed_node_is_not_terminal(hair_dryer_tree):
    # one option moves on, the other carries an inline solution
    assert not is_terminal(hair_dryer_tree.nodes["test-outlet"])


def test_solution_options_count_as_terminal_even_with_next_node():
    node = DecisionNode(
        id="n",
        question="?",
        options=[DecisionOption(id="o", text="x", next_node_id="m", solution="Fix it.")],
    )
    assert is_terminal(node)


def test_navigator_reports_terminal_node(hair_dryer_tree):
    nav = DecisionTreeNavigator(hair_dryer_tree)
    nav.select("noise-issue")
    assert nav.is_terminal()


def test_dangling_references_are_listed(hair_dryer_tree):
    assert hair_dryer_tree.dangling_references() == []

    hair_dryer_tree.nodes["noise-troubleshoot"].options.append(
        DecisionOption(id="ghost", text="?", next_node_id="missing")
    )

    assert hair_dryer_tree.dangling_references() == [
        ("noise-troubleshoot", "ghost", "missing")
    ]


def test_get_option(hair_dryer_tree):
    node = hair_dryer_tree.nodes["power-troubleshoot"]
    assert node.get_option("outlet-working").next_node_id == "check-power-button"
    assert node.get_option("nope") is None
