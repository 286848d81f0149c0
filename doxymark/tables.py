"""Template sources for the member summary tables of generated pages."""

from __future__ import annotations

from collections.abc import Callable

_VISIBILITIES = ("public", "protected")

_ONE_COLUMN = "\n| Name           |\n| -------------- |\n"
_TWO_COLUMNS = "\n|                | Name           |\n| -------------- | -------------- |\n"
_BRIEF = '{% if existsIn(child, "brief") %}<br>{{child.brief}}{% endif %} |\n'
_END = "{% endfor %}\n{% endif -%}\n"

_TEMPLATE_PARAMS = (
    '| {% if existsIn(child, "templateParams") -%}\n'
    "template <"
    "{% for param in child.templateParams -%}\n"
    "{{param.typePlain}} {{param.name}}"
    '{% if existsIn(param, "defvalPlain") %} ={{param.defvalPlain}}{% endif -%}\n'
    "{% if not loop.is_last %},{% endif -%}\n"
    "{% endfor %}\\> <br>{% endif -%}\n"
)

TableFactory = Callable[[str, str, bool], str]


def _title(text: str) -> str:
    """Upper-case the first character of ``text``."""
    return text[:1].upper() + text[1:]


def _header(title: str, key: str, inherited: bool) -> str:
    if inherited:
        return (
            f'{{%- if existsIn(base, "{key}") -%}}\n'
            f"**{title} inherited from [{{{{base.name}}}}]({{{{base.url}}}})**\n"
        )
    return f'{{%- if exists("{key}") %}}## {title}\n'


def _loop(key: str, inherited: bool, newline: bool = True) -> str:
    source = f"base.{key}" if inherited else key
    return f"{{% for child in {source} -%}}" + ("\n" if newline else "")


def _namespace_like(title: str, key: str, inherited: bool) -> str:
    return (
        _header(title, key, inherited)
        + _ONE_COLUMN
        + _loop(key, inherited)
        + "| **[{{child.name}}]({{child.url}})** "
        + _BRIEF
        + _END
    )


def _class_like(title: str, key: str, inherited: bool) -> str:
    return (
        _header(title, key, inherited)
        + _TWO_COLUMNS
        + _loop(key, inherited)
        + "| {{child.kind}} | "
        + "**[{{child.name}}]({{child.url}})** "
        + _BRIEF
        + _END
    )


def _class_strip_like(title: str, key: str, inherited: bool) -> str:
    return (
        _header(title, key, inherited)
        + _TWO_COLUMNS
        + _loop(key, inherited)
        + "| {{child.kind}} | "
        + "**[{{last(stripNamespace(child.name))}}]({{child.url}})** "
        + _BRIEF
        + _END
    )


def _type_like(title: str, key: str, inherited: bool) -> str:
    return (
        _header(title, key, inherited)
        + _TWO_COLUMNS
        + _loop(key, inherited)
        + _TEMPLATE_PARAMS
        + '{{child.kind}}{% if child.kind == "enum" and child.strong %} class{% endif %}'
        + '{% if existsIn(child, "type") %} {{child.type}} {% endif -%}'
        + "| **[{{child.name}}]({{child.url}})** "
        + '{% if child.kind == "enum" %}{ '
        + "{% for enumvalue in child.enumvalues -%}\n"
        + "{{enumvalue.name}}"
        + '{% if existsIn(enumvalue, "initializer") %} {{enumvalue.initializer}}{% endif -%}\n'
        + "{% if not loop.is_last %}, {% endif %}{% endfor -%}\n }"
        + "{% endif -%}\n"
        + _BRIEF
        + _END
    )


def _attribute_like(title: str, key: str, inherited: bool) -> str:
    return (
        _header(title, key, inherited)
        + _TWO_COLUMNS
        + _loop(key, inherited)
        + '| {% if existsIn(child, "type") %}{{child.type}} {% endif -%}\n'
        + "| **[{{child.name}}]({{child.url}})**"
        + " "
        + _BRIEF
        + _END
    )


def _friend_like(title: str, key: str, inherited: bool) -> str:
    if inherited:
        head = (
            f'{{% if existsIn(base, "{key}") %}}'
            f"**{title} inherited from [{{{{base.name}}}}]({{{{base.url}}}})**\n"
        )
    else:
        head = f'{{% if exists("{key}") %}}## {title}\n'
    return (
        head
        + _TWO_COLUMNS
        + _loop(key, inherited, newline=False)
        + '| {% if existsIn(child, "type") %}{{child.type}} {% endif -%}\n'
        + "| **[{{child.name}}]({{child.url}})**"
        + '{% if child.type != "class" and child.type != "struct" -%}\n'
        + "({% for param in child.params -%}\n"
        + "{{param.type}} {{param.name}}"
        + '{% if existsIn(param, "defval") %} ={{param.defval}}{% endif -%}\n'
        + "{% if not loop.is_last %}, {% endif -%}\n"
        + "{% endfor %})"
        + "{% if child.const %} const{% endif -%}\n"
        + "{% endif %} "
        + '{% if existsIn(child, "brief") %}<br>{{child.brief}}'
        + "{% endif %} |\n"
        + _END
    )


def _function_like(title: str, key: str, inherited: bool) -> str:
    return (
        _header(title, key, inherited)
        + _TWO_COLUMNS
        + _loop(key, inherited)
        + _TEMPLATE_PARAMS
        + "{% if child.virtual %}virtual {% endif -%}\n"
        + '{% if existsIn(child, "type") %}{{child.type}} {% endif -%}\n'
        + "| **[{{child.name}}]({{child.url}})**"
        + "({% for param in child.params -%}\n"
        + "{{param.type}} {{param.name}}"
        + '{% if existsIn(param, "defval") %} ={{param.defval}}{% endif -%}\n'
        + "{% if not loop.is_last %}, {% endif -%}\n"
        + "{% endfor %})"
        + "{% if child.const %} const{% endif -%}\n"
        + "{% if child.override %} override{% endif -%}\n"
        + "{% if child.default %} =default{% endif -%}\n"
        + "{% if child.deleted %} =delete{% endif -%}\n"
        + "{% if child.pureVirtual %} =0{% endif -%}\n"
        + " "
        + _BRIEF
        + _END
    )


def _define_like(title: str, key: str, inherited: bool) -> str:
    return (
        _header(title, key, inherited)
        + _TWO_COLUMNS
        + _loop(key, inherited)
        + '| {% if existsIn(child, "type") %}{{child.type}}{% endif %} | '
        + "**[{{child.name}}]({{child.url}})**"
        + '{% if existsIn(child, "params") %}'
        + "({% for param in child.params %}"
        + "{{param.name}}"
        + '{% if existsIn(param, "defval") %} ={{param.defval}}{% endif %}'
        + "{% if not loop.is_last %}, {% endif %}"
        + "{% endfor %}){% endif %} "
        + _BRIEF
        + _END
    )


def _for_visibilities(factory: TableFactory, title: str, key: str, inherited: bool) -> str:
    return "".join(
        factory(f"{_title(visibility)} {title}", visibility + _title(key), inherited)
        for visibility in _VISIBILITIES
    )


_MEMBER_SECTIONS: tuple[tuple[TableFactory, str, str], ...] = (
    (_class_strip_like, "Classes", "classes"),
    (_type_like, "Types", "types"),
    (_function_like, "Slots", "slots"),
    (_function_like, "Signals", "signals"),
    (_function_like, "Events", "events"),
    (_function_like, "Functions", "functions"),
    (_attribute_like, "Properties", "properties"),
    (_attribute_like, "Attributes", "attributes"),
)


def _member_sections(inherited: bool) -> str:
    body = "".join(
        _for_visibilities(factory, title, key, inherited)
        for factory, title, key in _MEMBER_SECTIONS
    )
    return body + _friend_like("Friends", "friends", inherited)


def create_base_table() -> str:
    """Tables listing members inherited from each base class."""
    return "{% for base in baseClasses -%}\n" + _member_sections(True) + "{% endfor -%}"


def create_member_table() -> str:
    """Tables listing the public and protected members of a class."""
    return _member_sections(False)


def _listing(key: str, heading: str) -> str:
    return (
        f'{{% if exists("{key}") %}}## {heading}\n'
        "\n"
        "| Name           |\n"
        "| -------------- |\n"
        f"{{% for child in {key} -%}}\n"
        "| **[{{child.title}}]({{child.url}})** "
        '{% if existsIn(child, "brief") %}<br>{{child.brief}}{% endif %} |\n'
        "{%- endfor %}\n"
        "{% endif -%}"
    )


def create_non_member_table() -> str:
    """Tables for namespaces, groups, directories and files."""
    parts = [
        _listing("groups", "Modules") + "\n\n",
        _listing("dirs", "Directories") + "\n\n",
        _listing("files", "Files") + "\n\n",
        _namespace_like("Namespaces", "namespaces", False),
        _class_like("Classes", "publicClasses", False),
        _type_like("Types", "publicTypes", False),
        _function_like("Slots", "publicSlots", False),
        _function_like("Signals", "publicSignals", False),
        _function_like("Functions", "publicFunctions", False),
        _attribute_like("Attributes", "publicAttributes", False),
        _define_like("Defines", "defines", False),
    ]
    return "".join(parts)