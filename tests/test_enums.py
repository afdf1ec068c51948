from cmsfields.enums import CONTAINER_WIDGETS, Button, PostFormat, Revision, Widget


def test_widget_enum_has_sixteen_kinds():
    assert len(Widget) == 16
    assert Widget.RELATION.value == "relation"
    assert Widget.DATETIME.value == "datetime"


def test_widget_is_string_enum():
    assert isinstance(Widget.LIST, str)
    assert Widget.LIST == "list"


def test_container_widgets():
    assert CONTAINER_WIDGETS == {"object", "list"}


def test_button_values_use_hyphens():
    assert Button.HEADING_THREE.value == "heading-three"
    assert Button.BULLETED_LIST.value == "bulleted-list"


def test_post_format_values():
    assert PostFormat.FRONTMATTER.value == "frontmatter"
    assert PostFormat.YAML_FRONTMATTER.value == "yaml-frontmatter"


def test_revision_values():
    assert Revision("earlier") is Revision.EARLIER
    assert Revision("later") is Revision.LATER
