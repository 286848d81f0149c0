"""Built-in page templates and writing them out to a directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from doxymark.config import DoxybookError
from doxymark.tables import create_base_table, create_member_table, create_non_member_table

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DefaultTemplate:
    """Source of a built-in template and the templates it relies on."""

    src: str
    dependencies: tuple[str, ...] = ()


def _inc(name: str, trim: bool = True) -> str:
    return f'{{% include "{name}" -%}}' if trim else f'{{% include "{name}" %}}'


def _opt(obj: str, key: str) -> str:
    """Print ``obj.key`` only when the key is present."""
    return f'{{% if existsIn({obj}, "{key}") %}}{{{{{obj}.{key}}}}}{{% endif %}}'


def _code_block(condition: str, body: str, close: str = "{% endif -%}\n\n") -> str:
    return f"{{% if {condition} -%}}\n```cpp\n{body}```{close}"


_FRONT_MATTER = "".join(
    f'{{% {opener} exists("{key}") -%}}\ntitle: {{{{{key}}}}}\n'
    for opener, key in (("if", "title"), ("else if", "name"))
) + '{% endif -%}\n{% if exists("summary") -%}\nsummary: {{summary}}\n{% endif -%}\n'

_HEADER = (
    "---\n"
    + _FRONT_MATTER
    + _inc("meta", False)
    + "\n---\n\n"
    + '{% if exists("title") -%}\n# {{title}}\n'
    + '{% else if exists("kind") and kind != "page" -%}\n'
    + "# {{name}} {{title(kind)}} Reference\n{% endif %}\n"
)

_BREADCRUMBS = (
    '{% if exists("moduleBreadcrumbs") -%}\n'
    "**Module:** {%- for module in moduleBreadcrumbs -%}\n"
    " **[{{module.title}}]({{module.url}})**{% if not loop.is_last %} **/** {% endif -%}\n"
    "{% endfor %}\n\n{% endif -%}"
)

_FOOTER = "-" * 31 + '\n\nUpdated on {{date("%e %B %Y at %H:%M:%S %Z")}}'


def _param_list(key: str, title: str) -> str:
    return (
        f'{{% if exists("{key}") %}}\n'
        f"**{title}**: \n\n"
        f"{{% for param in {key} %}}  * **{{{{param.name}}}}** {{{{param.text}}}}\n"
        "{% endfor %}\n"
        "{% endif -%}\n\n"
    )


def _item_list(key: str, title: str) -> str:
    return (
        f'{{% if exists("{key}") %}}\n'
        f"**{title}**: {{% if length({key}) == 1 %}}{{{{first({key})}}}}{{% else %}}\n\n"
        f"{{% for item in {key} %}}  * {{{{item}}}}\n"
        "{% endfor %}{% endif %}\n"
        "{% endif -%}\n\n"
    )


_PARAM_LISTS = (
    ("paramList", "Parameters"),
    ("returnsList", "Returns"),
    ("exceptionsList", "Exceptions"),
    ("templateParamsList", "Template Parameters"),
)

_ITEM_LISTS = (
    ("see", "See"),
    ("returns", "Return"),
    ("authors", "Author"),
    ("version", "Version"),
    ("since", "Since"),
    ("date", "Date"),
    ("note", "Note"),
    ("bugs", "Bug"),
    ("tests", "Test"),
    ("todos", "Todo"),
    ("warning", "Warning"),
    ("pre", "Precondition"),
    ("post", "Postcondition"),
    ("copyright", "Copyright"),
    ("invariant", "Invariant"),
    ("remark", "Remark"),
    ("attention", "Attention"),
    ("par", "Par"),
    ("rcs", "Rcs"),
)

_DETAILS = (
    '{% if exists("brief") %}{{brief}}\n{% endif -%}\n\n'
    + "".join(_param_list(key, title) for key, title in _PARAM_LISTS)
    + '{% if exists("deprecated") %}\n**Deprecated**: \n\n{{deprecated}}\n{% endif -%}\n\n'
    + "".join(_item_list(key, title) for key, title in _ITEM_LISTS)
    + '{% if exists("reimplements") %}\n'
    "**Reimplements**: [{{reimplements.fullname}}]({{reimplements.url}})\n\n"
    "{% endif -%}\n\n"
    '{% if exists("reimplementedBy") %}\n'
    "**Reimplemented by**: {% for impl in reimplementedBy %}[{{impl.fullname}}]({{impl.url}})"
    "{% if not loop.is_last %}, {% endif %}{% endfor %}\n\n"
    "{% endif -%}\n\n"
    '{% if exists("details") %}\n{{details}}\n\n{% endif -%}\n\n'
    '{% if exists("inbody") %}\n{{inbody}}\n\n{% endif -%}'
)

# A typed parameter with an optional default value; the closing endif is left open.
_TYPED_PARAM = (
    '{{param.typePlain}} {{param.name}}{% if existsIn(param, "defvalPlain") %} ={{param.defvalPlain}}'
)

_TEMPLATE_PREFIX = (
    '{% if exists("templateParams") -%}\ntemplate <{% for param in templateParams %}'
    + _TYPED_PARAM
    + "{% endif -%}\n{% if not loop.is_last %},\n{% endif %}{% endfor %}>\n{% endif -%}\n"
)

_LEADING_FLAGS = "".join(
    f"{{% if {flag} %}}{flag} {{% endif -%}}\n" for flag in ("static", "inline", "explicit", "virtual")
)

_TRAILING_FLAGS = "".join(
    f"{{% if {flag} %}}{text}{{% endif -%}}\n"
    for flag, text in (
        ("const", " const"),
        ("override", " override"),
        ("default", " =default"),
        ("deleted", " =delete"),
    )
) + "{% if pureVirtual %} =0{% endif %}\n"

_FUNCTION_SIGNATURE = (
    '{% if exists("typePlain") %}{{typePlain}} {% endif %}{{name}}{% if length(params) > 0 -%}\n'
    "(\n{% for param in params %}    "
    + _TYPED_PARAM
    + "{% endif -%}\n{% if not loop.is_last %},{% endif %}\n{% endfor -%}\n"
    "){% else -%}\n(){% endif -%}\n\n"
)

_FUNCTION_DETAILS = _code_block(
    'kind in ["function", "slot", "signal", "event"]',
    _TEMPLATE_PREFIX + "\n" + _LEADING_FLAGS + "\n" + _FUNCTION_SIGNATURE + _TRAILING_FLAGS,
)

_ENUM_DETAILS = (
    '{% if kind == "enum" -%}\n'
    + "| Enumerator | Value | Description |\n"
    + "| ---------- | ----- | ----------- |\n"
    + "{% for enumvalue in enumvalues %}| {{enumvalue.name}} | "
    + '{% if existsIn(enumvalue, "initializer") -%}\n'
    + '{{replace(enumvalue.initializer, "= ", "")}}{% endif -%}\n'
    + "| " + _opt("enumvalue", "brief") + " " + _opt("enumvalue", "details") + " |\n"
    + "{% endfor %}\n{% endif -%}\n\n"
)

_VARIABLE_DETAILS = _code_block(
    'kind in ["variable", "property"]',
    "{% if static %}static {% endif -%}\n"
    '{% if exists("typePlain") %}{{typePlain}} {% endif -%}{{name}}'
    '{% if exists("initializer") %} {{initializer}}{% endif %};\n',
)

_TYPEDEF_DETAILS = _code_block('kind == "typedef"', "{{definition}};\n")

_USING_DETAILS = _code_block('kind == "using"', _TEMPLATE_PREFIX + "{{definition}};\n")

_FRIEND_DETAILS = _code_block(
    'kind == "friend"',
    'friend {% if exists("typePlain") %}{{typePlain}} {% endif -%}\n'
    '{{name}}{% if exists("params") %}{% endif -%}\n'
    "{% if length(params) > 0 -%}\n(\n{% for param in params %}    "
    + _TYPED_PARAM
    + "{% endif -%}\n{% if not loop.is_last %},\n{% endif %}\n{% endfor -%}\n"
    '){% else if typePlain != "class" -%}\n(){% endif %};\n',
)

_DEFINE_DETAILS = _code_block(
    'kind == "define"',
    '#define {{name}}{% if exists("params") -%}\n(\n'
    "{% for param in params %}    {{param.name}}"
    '{% if existsIn(param, "defvalPlain") %} ={{param.defvalPlain}}{% endif -%}\n'
    "{% if not loop.is_last %},\n{% endif -%}\n{% endfor %}\n)\n"
    "{% else %} {% endif -%}\n"
    '{% if exists("initializer") %}{{initializer}}{% endif %}\n',
    close="{% endif %}\n\n",
)

_MEMBER_DETAILS = (
    _FUNCTION_DETAILS
    + _ENUM_DETAILS
    + _VARIABLE_DETAILS
    + _TYPEDEF_DETAILS
    + _USING_DETAILS
    + _FRIEND_DETAILS
    + _DEFINE_DETAILS
    + _inc("details")
)


def _documentation(key: str, heading: str, close: str) -> str:
    return (
        f'{{% if exists("{key}") %}}## {heading}\n\n'
        f"{{% for child in {key} %}}### {{{{child.kind}}}} {{{{child.name}}}}\n\n"
        '{{ render("member_details", child) }}\n'
        f"{{% endfor %}}{close}"
    )


_NONCLASS_MEMBERS_DETAILS = "\n".join(
    _documentation(key, heading, "{% endif %}")
    for key, heading in (
        ("publicTypes", "Types Documentation"),
        ("publicFunctions", "Functions Documentation"),
        ("publicAttributes", "Attributes Documentation"),
        ("defines", "Macros Documentation"),
    )
)

_CLASS_MEMBERS_DETAILS = "\n\n".join(
    _documentation(key, heading, "{% endif -%}")
    for key, heading in (
        ("publicTypes", "Public Types Documentation"),
        ("protectedTypes", "Protected Types Documentation"),
        ("publicSlots", "Public Slots Documentation"),
        ("protectedSlots", "Protected Slots Documentation"),
        ("publicSignals", "Public Signals Documentation"),
        ("protectedSignals", "Protected Signals Documentation"),
        ("publicEvents", "Public Events Documentation"),
        ("protectedEvents", "Protected Events Documentation"),
        ("publicFunctions", "Public Functions Documentation"),
        ("protectedFunctions", "Protected Functions Documentation"),
        ("publicProperties", "Public Property Documentation"),
        ("protectedProperties", "Protected Property Documentation"),
        ("publicAttributes", "Public Attributes Documentation"),
        ("protectedAttributes", "Protected Attributes Documentation"),
        ("friends", "Friends"),
    )
)

_BRIEF = (
    '{% if exists("brief") %}{{brief}}{% endif %}'
    "{% if hasDetails %} [More...](#detailed-description){% endif %}"
)

_DETAILED_DESCRIPTION = (
    "{% if hasDetails %}## Detailed Description\n\n" + _inc("details", False) + "{% endif -%}\n\n"
)


def _nonclass_page(breadcrumbs: bool, trim_details: bool, tail: str) -> str:
    """Page layout shared by namespaces, groups and files."""
    parts = [_inc("header") + "\n\n"]
    if breadcrumbs:
        parts.append(_inc("breadcrumbs") + "\n\n")
    parts.append(_BRIEF + "\n\n")
    parts.append(_inc("nonclass_members_tables") + "\n\n")
    parts.append(_DETAILED_DESCRIPTION)
    parts.append(_inc("nonclass_members_details", trim_details) + "\n\n")
    parts.append(tail)
    return "".join(parts)


_KIND_NONCLASS = _nonclass_page(True, False, _inc("footer", False))

_KIND_GROUP = _nonclass_page(True, True, _inc("footer") + "\n")

_KIND_FILE = _nonclass_page(
    False,
    True,
    '{% if exists("programlisting")%}## Source code\n\n'
    + "```cpp\n{{programlisting}}\n```\n{% endif %}\n\n"
    + _inc("footer", False)
    + "\n",
)

_CHILD_LINK = (
    '{% if existsIn(child, "url") %}[{{child.name}}]({{child.url}})'
    "{% else %}{{child.name}}{% endif %}"
)


def _relations(key: str, label: str) -> str:
    return (
        f'{{%- if exists("{key}") %}}{label} {{% for child in {key} %}}{_CHILD_LINK}'
        "{% if not loop.is_last %}, {% endif %}{% endfor %}\n\n{% endif -%}\n"
    )


_KIND_CLASS = (
    _inc("header") + "\n\n"
    + _inc("breadcrumbs", False) + "\n\n"
    + _BRIEF + "\n\n"
    + '{% if exists("includes") %}\n`#include {{includes}}`\n\n{% endif -%}\n\n'
    + _relations("baseClasses", "Inherits from")
    + _relations("derivedClasses", "Inherited by")
    + "\n"
    + '{%- include "class_members_tables" -%}\n\n'
    + "{% if hasAdditionalMembers %}## Additional inherited members\n\n"
    + _inc("class_members_inherited_tables", False) + "\n{% endif -%}\n\n"
    + "{% if hasDetails %}## Detailed Description\n\n"
    + '```cpp{% if exists("templateParams") %}\n'
    + "template <{% for param in templateParams %}"
    + _TYPED_PARAM
    + "{% endif %}{% if not loop.is_last %},\n{% endif %}{% endfor %}>{% endif %}\n"
    + '{% if kind == "interface" %}class{% else %}{{kind}}{% endif %} {{name}};\n```\n\n'
    + _inc("details", False) + "{% endif -%}\n\n"
    + _inc("class_members_details") + "\n\n"
    + _inc("footer", False)
)


def _framed(body: str) -> str:
    """Body placed between the header and the footer."""
    return _inc("header", False) + "\n\n" + body + "\n\n" + _inc("footer", False) + "\n"


_KIND_PAGE = _framed('{% if exists("details") %}{{details}}{% endif %}')

_INDEX_PAGE = _framed(_inc("index", False))

_INDEX_DEPTH = 7


def _index_template() -> str:
    """Nested bullet list of index children, up to a fixed depth."""
    nested = ""
    for level in range(_INDEX_DEPTH, 0, -1):
        child = f"child{level}"
        entry = (
            "\n" + "    " * level
            + f"* **{{{{{child}.kind}}}} [{{{{last(stripNamespace({child}.title))}}}}]"
            f"({{{{{child}.url}}}})** "
            f'{{% if existsIn({child}, "brief") %}}<br>{{{{{child}.brief}}}}{{% endif %}}'
            + nested
        )
        parent = f"child{level - 1}"
        nested = (
            f'{{% if existsIn({parent}, "children") %}}'
            f"{{% for {child} in {parent}.children %}}"
            + entry
            + "{% endfor %}{% endif %}"
        )
    return (
        "\n{% for child0 in children %}"
        "* **{{child0.kind}} [{{child0.title}}]({{child0.url}})** "
        '{% if existsIn(child0, "brief") %}<br>{{child0.brief}}{% endif %}'
        + nested
        + "\n{% endfor %}\n"
    )


_INDEX = _index_template()

_PAGE_PARTS = ("header", "details", "footer")
_INDEX_PARTS = ("header", "index", "footer")
_NONCLASS_PARTS = ("header", "breadcrumbs", "nonclass_members_tables", "nonclass_members_details", "footer")

DEFAULT_TEMPLATES: dict[str, DefaultTemplate] = {
    "meta": DefaultTemplate(""),
    "header": DefaultTemplate(_HEADER, ("meta",)),
    "footer": DefaultTemplate(_FOOTER),
    "details": DefaultTemplate(_DETAILS),
    "breadcrumbs": DefaultTemplate(_BREADCRUMBS),
    "member_details": DefaultTemplate(_MEMBER_DETAILS, ("details",)),
    "class_members_tables": DefaultTemplate(create_member_table()),
    "class_members_inherited_tables": DefaultTemplate(create_base_table()),
    "class_members_details": DefaultTemplate(_CLASS_MEMBERS_DETAILS, ("member_details",)),
    "nonclass_members_tables": DefaultTemplate(create_non_member_table()),
    "nonclass_members_details": DefaultTemplate(_NONCLASS_MEMBERS_DETAILS, ("member_details",)),
    "index": DefaultTemplate(_INDEX),
    "kind_nonclass": DefaultTemplate(_KIND_NONCLASS, _NONCLASS_PARTS),
    "kind_class": DefaultTemplate(
        _KIND_CLASS,
        (
            "header",
            "breadcrumbs",
            "class_members_tables",
            "class_members_inherited_tables",
            "class_members_details",
            "footer",
        ),
    ),
    "kind_group": DefaultTemplate(_KIND_GROUP, _NONCLASS_PARTS),
    "kind_file": DefaultTemplate(
        _KIND_FILE,
        ("header", "nonclass_members_tables", "nonclass_members_details", "footer"),
    ),
    "kind_page": DefaultTemplate(_KIND_PAGE, _PAGE_PARTS),
    "kind_example": DefaultTemplate(_KIND_PAGE, _PAGE_PARTS),
    "index_classes": DefaultTemplate(_INDEX_PAGE, _INDEX_PARTS),
    "index_namespaces": DefaultTemplate(_INDEX_PAGE, _INDEX_PARTS),
    "index_groups": DefaultTemplate(_INDEX_PAGE, _INDEX_PARTS),
    "index_files": DefaultTemplate(_INDEX_PAGE, _INDEX_PARTS),
    "index_pages": DefaultTemplate(_INDEX_PAGE, _INDEX_PARTS),
    "index_examples": DefaultTemplate(_INDEX_PAGE, _INDEX_PARTS),
}


def save_default_templates(path: str | Path) -> None:
    """Write every built-in template into ``path`` as ``<name>.tmpl``."""
    for name, template in DEFAULT_TEMPLATES.items():
        tmpl_path = Path(path) / f"{name}.tmpl"
        log.info("Creating default template %s", tmpl_path)
        try:
            with open(tmpl_path, "w", encoding="utf-8", newline="") as file:
                file.write(template.src)
        except OSError as exc:
            raise DoxybookError(f"Failed to open file {tmpl_path} for writing") from exc