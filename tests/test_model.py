import pytest

from ox.tools.model import Attr, build_attrs, build_imports, default_attrs

DEFAULTS = [
    Attr("id", "uuid"),
    Attr("created_at", "timestamp"),
    Attr("updated_at", "timestamp"),
]


@pytest.mark.parametrize(
    "args, expected",
    [
        ([], DEFAULTS),
        (
            ["description:text", "title"],
            DEFAULTS + [Attr("description", "text"), Attr("title", "string")],
        ),
        (
            ["description:text", "id:int"],
            [
                Attr("created_at", "timestamp"),
                Attr("updated_at", "timestamp"),
                Attr("description", "text"),
                Attr("id", "int"),
            ],
        ),
        (
            ["created_at:int", "description:text", "updated_at:int", "id:int"],
            [
                Attr("created_at", "int"),
                Attr("description", "text"),
                Attr("updated_at", "int"),
                Attr("id", "int"),
            ],
        ),
    ],
    ids=["empty", "without-type", "replacing-defaults", "replacing-defaults-2"],
)
def test_build_attrs(args, expected):
    assert build_attrs(args) == expected


def test_build_attrs_lowercases_type():
    assert build_attrs(["name:TEXT"])[-1] == Attr("name", "text")


def test_default_attrs_is_case_insensitive():
    assert default_attrs(["ID:int", "Created_At:int"]) == ["updated_at:timestamp"]


def test_default_attrs_for_no_args():
    assert default_attrs([]) == [
        "id:uuid",
        "created_at:timestamp",
        "updated_at:timestamp",
    ]


@pytest.mark.parametrize(
    "attrs, expected",
    [
        (DEFAULTS, ["fmt", "github.com/gofrs/uuid", "time"]),
        (
            DEFAULTS
            + [Attr("description", "nulls.String"), Attr("prices", "slices.Float")],
            [
                "fmt",
                "github.com/gobuffalo/nulls",
                "github.com/gobuffalo/pop/v5/slices",
                "github.com/gofrs/uuid",
                "time",
            ],
        ),
    ],
    ids=["defaults", "all-possible"],
)
def test_build_imports(attrs, expected):
    assert build_imports(attrs) == expected


def test_build_imports_without_attrs():
    assert build_imports([]) == ["fmt"]


@pytest.mark.parametrize(
    "common_type, expected",
    [
        ("text", "string"),
        ("Text", "string"),
        ("datetime", "time.Time"),
        ("nulls.int", "nulls.Int"),
        ("nulls.decimal", "nulls.Float64"),
        ("uuid", "uuid.UUID"),
        ("jsonb", "slices.Map"),
        ("[]float32", "slices.Float"),
        ("decimal", "float64"),
        ("blob", "[]byte"),
        ("int", "int"),
    ],
)
def test_go_type(common_type, expected):
    assert Attr("field", common_type).go_type() == expected