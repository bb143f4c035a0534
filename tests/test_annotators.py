from failwrap import (
    Error,
    with_code,
    with_ignorable,
    with_message,
    with_messagef,
    with_param,
    with_params,
    with_tags,
)


def make_error() -> Error:
    return Error(cause=ValueError("leaf"))


def test_with_message_prepends() -> None:
    err = make_error()
    with_message("inner")(err)
    with_message("outer")(err)
    assert err.messages == ("outer", "inner")


def test_with_messagef_formats() -> None:
    err = make_error()
    with_messagef("loading {} for {user}", "profile", user="bob")(err)
    assert err.last_message() == "loading profile for bob"


def test_with_messagef_embeds_format_failure() -> None:
    err = make_error()
    with_messagef("{missing}")(err)
    assert err.last_message().startswith("{missing} (format error: KeyError(")


def test_with_code_sets_any_value() -> None:
    err = make_error()
    with_code(404)(err)
    assert err.code == 404
    with_code("E_NOT_FOUND")(err)
    assert err.code == "E_NOT_FOUND"


def test_with_ignorable() -> None:
    err = make_error()
    with_ignorable()(err)
    assert err.ignorable is True
    with_ignorable(False)(err)
    assert err.ignorable is False


def test_with_tags_deduplicates() -> None:
    err = make_error()
    with_tags("db", "timeout", "db")(err)
    with_tags("timeout", "retry")(err)
    assert err.tags == ("db", "timeout", "retry")


def test_with_params_last_write_wins() -> None:
    err = make_error()
    with_params({"id": 1, "name": "bob"})(err)
    with_params({"id": 2}, region="eu")(err)
    assert err.params == {"id": 2, "name": "bob", "region": "eu"}


def test_with_params_keywords_override_mapping() -> None:
    err = make_error()
    with_params({"id": 1}, id=2)(err)
    assert err.params == {"id": 2}


def test_with_param() -> None:
    err = make_error()
    with_param("attempt", 3)(err)
    assert err.params == {"attempt": 3}


def test_annotators_replace_instead_of_mutating() -> None:
    err = make_error()
    with_params(id=1)(err)
    with_tags("db")(err)
    params, tags = err.params, err.tags

    with_params(id=2)(err)
    with_tags("cache")(err)

    assert params == {"id": 1}
    assert tags == ("db",)


def test_with_params_accepts_params_key() -> None:
    err = make_error()
    with_params(params=1)(err)
    with_params({"id": 2}, params=3)(err)
    assert err.params == {"params": 3, "id": 2}
