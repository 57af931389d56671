from gitgud_ui.error_dialog import ErrorDialog


def test_error_dialog_basics():
    dialog = ErrorDialog()
    assert not dialog.is_visible()

    dialog.show_error("Test error message")
    assert dialog.is_visible()
    assert dialog.error_message == "Test error message"

    dialog.hide()
    assert not dialog.is_visible()
    assert dialog.error_message == ""


def test_error_dialog_long_message():
    dialog = ErrorDialog()
    long_message = "Error: " + "x" * 200
    dialog.show_error(long_message)

    assert dialog.is_visible()
    assert dialog.has_details()


def test_short_message_has_no_details():
    dialog = ErrorDialog()
    dialog.show_error("short")
    assert not dialog.has_details()
    assert dialog.toggle_details() is False
    assert dialog.show_details is False


def test_toggle_details_on_long_message():
    dialog = ErrorDialog()
    dialog.show_error("y" * 101)
    assert dialog.toggle_details() is True
    assert dialog.toggle_details() is False


def test_show_error_resets_details():
    dialog = ErrorDialog()
    dialog.show_error("z" * 150)
    dialog.toggle_details()
    dialog.show_error("z" * 150)
    assert dialog.show_details is False


def test_error_dialog_default():
    dialog = ErrorDialog()
    assert not dialog.is_visible()
    assert dialog.error_message == ""


def test_error_shown_only_when_not_already_visible():
    dialog = ErrorDialog()
    error_msg = "Failed to open repository"
    if not dialog.is_visible():
        dialog.show_error(error_msg)
    assert dialog.is_visible()

    if not dialog.is_visible():
        dialog.show_error("second error")
    assert dialog.error_message == error_msg

    dialog.hide()
    assert not dialog.is_visible()