import pytest

from patternkit.alerts import (
    Alert,
    ErrorAlert,
    SuccessAlert,
    TextBox,
    WarningAlert,
    alert_for,
    main,
)


@pytest.mark.parametrize(
    "message_type, cls",
    [("success", SuccessAlert), ("warning", WarningAlert), ("error", ErrorAlert), ("???", ErrorAlert)],
)
def test_alert_for(message_type, cls):
    assert type(alert_for(message_type)) is cls


def test_messages():
    assert ErrorAlert().create_text_box().render() == "Some Error has occurred. Exiting Program."
    assert SuccessAlert().create_text_box().render() == (
        "Success! Congratulations! Everything worked as expected."
    )
    assert WarningAlert().create_text_box().message.startswith("This is a warning!")


def test_text_box_renders_its_message():
    assert TextBox("hello").render() == "hello"


def test_alert_is_abstract():
    with pytest.raises(TypeError):
        Alert()


def test_main_prints_selected_message(capsys):
    main(["success"])
    assert capsys.readouterr().out.strip() == SuccessAlert().create_text_box().message


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "nonsense")
    main([])
    assert capsys.readouterr().out.strip() == ErrorAlert().create_text_box().message