# UI.py
""""PySide6 user interface for the calculator.

Structure
---------
- Calculator UI: main window with expression field, keypad, result, explanation and history
- Settings UI: modal dialog for user preferences

Responsibilities (Calculator)
-----------------------------
- Build window, expression field, keypad and side panels
- Dispatch the expression to MathEngine in a worker thread
- Render the result, the shunting-yard / evaluation steps and MathEngine errors
- Keep the session history (capped) and let the user reuse old expressions
- Share links and clipboard integration, optional auto-calculate after paste


Responsibilities (Settings)
---------------------------

- Load Current Settings and Settings Descriptions via config_manager
- Validate user input (e.g. minimum decimal places)
- Save and apply theme changes immediately


Threading Note
--------------
Evaluation is executed off the UI thread in Worker(QObject).
Results (or errors) are emitted via a Qt signal and handled back in the UI.
"""""

import logging
import sys
import threading

import pyperclip
from PySide6 import QtWidgets
from PySide6.QtCore import Qt, QObject, Signal

from . import MathEngine
from . import config_manager
from . import error as E
from .history import CalculationHistory
from .share import share_link

logger = logging.getLogger(__name__)

CALCULATE_KEY = "⏎"
SETTINGS_KEY = "⚙"
PASTE_KEY = "📋"

# (text, row, column)
KEYPAD = [
    ('7', 0, 0), ('8', 0, 1), ('9', 0, 2), ('/', 0, 3), ('(', 0, 4), (')', 0, 5),
    ('4', 1, 0), ('5', 1, 1), ('6', 1, 2), ('*', 1, 3), ('^', 1, 4), (',', 1, 5),
    ('1', 2, 0), ('2', 2, 1), ('3', 2, 2), ('-', 2, 3), ('sin', 2, 4), ('cos', 2, 5),
    ('0', 3, 0), ('.', 3, 1), ('pi', 3, 2), ('+', 3, 3), ('tan', 3, 4), ('sqrt', 3, 5),
    ('e', 4, 0), ('<', 4, 1), ('C', 4, 2), ('log', 4, 3), ('ln', 4, 4), ('pow', 4, 5),
    (SETTINGS_KEY, 5, 0), (PASTE_KEY, 5, 1), (CALCULATE_KEY, 5, 2),
]
FUNCTION_KEYS = ['sin', 'cos', 'tan', 'sqrt', 'log', 'ln', 'pow']


def is_shift_pressed():
    """""

    Small and simple check, whether shift is pressed or not.
    Used for "shift to copy the result instead of the share link".

    """""
    from pynput.keyboard import Controller

    keyboard_controller = Controller()
    return keyboard_controller.shift_pressed


class Worker(QObject):
    """""

    Runs in a separate thread, transmits the expression to MathEngine.py
    and emits a Signal when the calculation is done / failed back to the Calculator UI.

    """""

    job_finished = Signal(object, str, bool)

    def __init__(self, problem, record):
        super().__init__()
        self.data = problem
        self.record = record  # False for share links: evaluated but not stored in history

    def run_Calc(self):

        try:
            explanation = MathEngine.calculate(self.data)
            self.job_finished.emit(explanation, self.data, self.record)

        except E.MathError as e:
            # Known, handled error (e.g. "Division by zero"); calculate() already attached the equation
            self.job_finished.emit(e, self.data, self.record)


class SettingsDialog(QtWidgets.QDialog):
    """""

    Settings window: booleans become checkboxes, numbers and text become input fields.
    OK validates and saves through config_manager, Cancel discards the changes.

    """""

    settings_saved = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}

        # --- 1. Window Setup ---
        self.setWindowTitle("Calculator Settings")
        self.setMinimumSize(360, 260)

        main_layout = QtWidgets.QVBoxLayout(self)

        # --- 2. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")
        self.setting_description_list = config_manager.load_setting_description("all")

        # --- 3. Build Widgets ---
        for key_value, value in self.setting_value_list.items():
            description = self.setting_description_list.get(key_value, key_value)

            if isinstance(value, bool):
                checkbox = QtWidgets.QCheckBox(description)
                checkbox.setChecked(value)
                main_layout.addWidget(checkbox)
                self.widgets[key_value] = checkbox

            else:
                row_h_layout = QtWidgets.QHBoxLayout()
                main_layout.addLayout(row_h_layout)
                if key_value == "decimal_places":
                    description += " (min. 2)"
                label = QtWidgets.QLabel(description + ":")
                input_field = QtWidgets.QLineEdit()
                input_field.setPlaceholderText(str(value))  # Show current value as placeholder

                row_h_layout.addWidget(label)
                row_h_layout.addWidget(input_field)
                row_h_layout.setStretch(1, 1)
                self.widgets[key_value] = input_field

        # --- 4. OK / Cancel Buttons ---
        button_box = QtWidgets.QDialogButtonBox(QtWidgets.QDialogButtonBox.Ok | QtWidgets.QDialogButtonBox.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(lambda: self.save_settings(self.setting_value_list))
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self, setting_value_list):
        for key_value, widget in self.widgets.items():

            if isinstance(widget, QtWidgets.QCheckBox):
                setting_value_list[key_value] = widget.isChecked()
                continue

            new_value_str = widget.text().strip()
            if new_value_str == "":
                continue  # Left blank: keep the old value

            if isinstance(setting_value_list[key_value], str):
                setting_value_list[key_value] = new_value_str
                continue

            try:
                new_value_int = int(new_value_str)
                if key_value == "decimal_places" and new_value_int < 2:
                    raise ValueError(f"'{new_value_int}' is too small. Minimum is 2.")
                if key_value != "decimal_places" and new_value_int < 1:
                    raise ValueError(f"'{new_value_int}' is too small. Minimum is 1.")
                setting_value_list[key_value] = new_value_int

            except ValueError as e:
                # Show an error box and STOP the save process
                logger.info("Invalid settings input for %s: %s", key_value, e)
                QtWidgets.QMessageBox.critical(self, "Invalid Input:",
                                               f"Error in input for '{key_value}':\n\n{e}\n\nPlease correct your input.")
                return

        saved_settings = config_manager.save_setting(setting_value_list)

        if saved_settings != {}:
            self.settings_saved.emit()
            self.accept()
        else:
            QtWidgets.QMessageBox.critical(self, "Error",
                                           f"Error 5000: {E.ERROR_MESSAGES['5000']}")

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QLabel {color: white;}
                        QCheckBox {color: white;}
                        QLineEdit {background-color: #444444;color: white;border: 1px solid #666666;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class CalculatorWindow(QtWidgets.QWidget):
    shift_is_held = False

    def __init__(self, initial_expression=None):
        super().__init__()

        # --- 1. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")

        # --- 2. Instance State Variables ---
        self.history = CalculationHistory(self.setting_value_list["history_limit"])
        self.last_explanation = None
        self.thread_active = False
        self.worker = None
        self.button_objects = {}

        # --- 3. Window Setup ---
        self.setWindowTitle("Calculator")
        self.resize(900, 560)
        main_h_layout = QtWidgets.QHBoxLayout(self)

        # --- 4. History Panel ---
        history_v_layout = QtWidgets.QVBoxLayout()
        main_h_layout.addLayout(history_v_layout, 1)
        history_v_layout.addWidget(QtWidgets.QLabel("History"))
        self.history_list = QtWidgets.QListWidget()
        self.history_list.itemClicked.connect(self.reuse_history_item)
        history_v_layout.addWidget(self.history_list)
        clear_history_button = QtWidgets.QPushButton("Clear history")
        clear_history_button.clicked.connect(self.clear_history)
        history_v_layout.addWidget(clear_history_button)

        # --- 5. Calculator Panel ---
        calc_v_layout = QtWidgets.QVBoxLayout()
        main_h_layout.addLayout(calc_v_layout, 2)

        self.display = QtWidgets.QLineEdit()
        self.display.setPlaceholderText("e.g. 2*sin(pi/2) + sqrt(9) - log(100)")
        font = self.display.font()
        font.setPointSize(18)
        self.display.setFont(font)
        self.display.returnPressed.connect(lambda: self.start_calculation())
        calc_v_layout.addWidget(self.display)

        button_grid = QtWidgets.QGridLayout()
        button_grid.setSpacing(2)
        calc_v_layout.addLayout(button_grid)
        for text, row, col in KEYPAD:
            button = QtWidgets.QPushButton(text)
            if text == CALCULATE_KEY:
                button.setStyleSheet("background-color: #007bff; color: white; font-weight: bold;")
                button.clicked.connect(lambda checked=False: self.start_calculation())
            elif text == SETTINGS_KEY:
                button.clicked.connect(self.open_settings)
            else:
                button.clicked.connect(lambda checked=False, val=text: self.handle_button_press(val))
            button_grid.addWidget(button, row, col)
            self.button_objects[text] = button

        self.note_field = QtWidgets.QLineEdit()
        self.note_field.setPlaceholderText("Note (optional)")
        calc_v_layout.addWidget(self.note_field)

        self.result_view = QtWidgets.QLabel("—")
        font = self.result_view.font()
        font.setPointSize(22)
        self.result_view.setFont(font)
        self.result_view.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.result_view.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        calc_v_layout.addWidget(self.result_view)

        share_h_layout = QtWidgets.QHBoxLayout()
        calc_v_layout.addLayout(share_h_layout)
        self.share_box = QtWidgets.QLabel("—")
        self.share_box.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        share_h_layout.addWidget(self.share_box, 1)
        copy_button = QtWidgets.QPushButton("Copy link")
        copy_button.setToolTip("Hold Shift to copy the result instead")
        copy_button.clicked.connect(self.copy_share)
        share_h_layout.addWidget(copy_button)
        reuse_button = QtWidgets.QPushButton("Reuse result")
        reuse_button.clicked.connect(self.reuse_result)
        share_h_layout.addWidget(reuse_button)

        # --- 6. Step-by-step explanation ---
        self.steps_box = QtWidgets.QGroupBox("Step-by-step explanation")
        steps_h_layout = QtWidgets.QHBoxLayout(self.steps_box)
        self.shunting_list = QtWidgets.QListWidget()
        self.eval_list = QtWidgets.QListWidget()
        for title, widget in (("Shunting-yard", self.shunting_list), ("RPN evaluation", self.eval_list)):
            column = QtWidgets.QVBoxLayout()
            column.addWidget(QtWidgets.QLabel(title))
            column.addWidget(widget)
            steps_h_layout.addLayout(column)
        calc_v_layout.addWidget(self.steps_box, 1)

        self.apply_settings()

        if initial_expression:
            # Shared expression: evaluated, but not stored in the history
            self.display.setText(initial_expression)
            self.start_calculation(record=False)

    # --- Key Event Handlers ---
    def keyPressEvent(self, event):
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = True
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event):
        if event.key() == Qt.Key.Key_Shift:
            self.shift_is_held = False
        super().keyReleaseEvent(event)

    def handle_button_press(self, value):
        if value == "C":
            self.display.clear()

        elif value == "<":
            self.display.backspace()

        elif value == PASTE_KEY:
            clipboard_text = QtWidgets.QApplication.clipboard().text().strip()
            if clipboard_text:
                self.display.insert(clipboard_text)
                if self.setting_value_list["after_paste_enter"] == True:
                    self.start_calculation()

        elif value in FUNCTION_KEYS:
            self.display.insert(value + "(")

        else:
            self.display.insert(value)

        self.display.setFocus()

    # --- Calculation ---
    def start_calculation(self, record=True):
        if self.thread_active:
            logger.info("Calculation requested while another one is running")  # 4002
            return

        self.thread_active = True
        self.update_return_button()
        self.result_view.setText("...")
        QtWidgets.QApplication.processEvents()  # Force UI update *before* starting thread

        # --- Start Thread ---
        self.worker = Worker(self.display.text(), record)
        self.worker.job_finished.connect(self.Calc_result)
        my_thread = threading.Thread(target=self.worker.run_Calc, daemon=True)
        my_thread.start()

    def Calc_result(self, result, equation, record):
        self.thread_active = False
        self.update_return_button()

        if isinstance(result, E.MathError):
            self.show_error(result)
            self.result_view.setText("—")
            return

        explanation = result
        self.last_explanation = explanation
        self.result_view.setText(
            MathEngine.result_line(explanation, self.setting_value_list["decimal_places"]))
        self.share_box.setText(share_link(explanation.expression, self.setting_value_list["share_base_url"]))

        self.shunting_list.clear()
        self.shunting_list.addItems(list(explanation.shunting_steps))
        self.shunting_list.addItem(f"Postfix: {explanation.postfix_text}")
        self.eval_list.clear()
        self.eval_list.addItems(list(explanation.eval_steps))

        if record:
            self.history.record(explanation.expression, explanation.result, self.note_field.text())
            self.note_field.clear()
            self.refresh_history()

    def show_error(self, error_obj):
        error_box = QtWidgets.QMessageBox(self)
        error_code = error_obj.code
        additional_info = f"Details: {error_obj.message}\nExpression: {error_obj.equation}"

        error_box.setIcon(QtWidgets.QMessageBox.Critical)
        error_box.setWindowTitle("Calculation error")
        error_box.setText(f"Error {error_code}: {E.ERROR_MESSAGES.get(error_code, 'Unknown error')}")
        error_box.setInformativeText(additional_info)
        error_box.setStandardButtons(QtWidgets.QMessageBox.Ok)
        error_box.setStyleSheet(self.get_message_box_stylesheet())
        error_box.exec()

    # --- History / Share ---
    def refresh_history(self):
        self.history_list.clear()
        decimal_places = self.setting_value_list["decimal_places"]
        for entry in self.history.entries():
            text, rounding = MathEngine.format_result(entry.result, decimal_places)
            line = f"{entry.timestamp}\n{entry.expression}\n{'≈' if rounding else '='} {text}"
            if entry.note:
                line += f"\n📝 {entry.note}"
            item = QtWidgets.QListWidgetItem(line)
            item.setData(Qt.ItemDataRole.UserRole, entry.expression)
            self.history_list.addItem(item)

    def reuse_history_item(self, item):
        self.display.setText(item.data(Qt.ItemDataRole.UserRole))
        self.display.setFocus()

    def clear_history(self):
        answer = QtWidgets.QMessageBox.question(self, "Clear history", "Clear the history?")
        if answer == QtWidgets.QMessageBox.StandardButton.Yes:
            self.history.clear()
            self.refresh_history()

    def copy_share(self):
        if self.last_explanation is None:
            return
        if self.shift_is_held or is_shift_pressed():
            text, _ = MathEngine.format_result(self.last_explanation.result,
                                               self.setting_value_list["decimal_places"])
            pyperclip.copy(text)
        else:
            pyperclip.copy(self.share_box.text())

    def reuse_result(self):
        if self.last_explanation is None:
            self.show_error(E.InputError("No result to reuse", code="4003", equation=self.display.text()))
            return
        self.display.setText(repr(self.last_explanation.result))
        self.display.setFocus()

    # --- Appearance ---
    def update_return_button(self):
        return_button = self.button_objects.get(CALCULATE_KEY)
        if not return_button:
            return

        # Red "X" while busy, blue return key when idle
        if self.thread_active == True:
            return_button.setStyleSheet("background-color: #FF0000; color: white; font-weight: bold;")
            return_button.setText("X")
        else:
            return_button.setStyleSheet("background-color: #007bff; color: white; font-weight: bold;")
            return_button.setText(CALCULATE_KEY)
        return_button.update()

    def apply_settings(self):
        self.history.resize(self.setting_value_list["history_limit"])
        self.steps_box.setVisible(self.setting_value_list["show_steps"] == True)
        self.update_darkmode()
        self.refresh_history()

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            for text, button in self.button_objects.items():
                if text != CALCULATE_KEY:
                    button.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
            self.setStyleSheet("background-color: #121212; color: white;")
        else:
            for text, button in self.button_objects.items():
                if text != CALCULATE_KEY:
                    button.setStyleSheet("font-weight: normal;")
            self.setStyleSheet("")
        self.update_return_button()

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()  # modal

        # Reload settings after dialog closes
        self.setting_value_list = config_manager.load_setting_value("all")
        self.apply_settings()

    def get_message_box_stylesheet(self):
        if self.setting_value_list["darkmode"] == True:
            return """
                QMessageBox {
                    background-color: #121212;
                    color: white;
                }
                QLabel {
                    color: white;
                }
                QPushButton {
                    background-color: #2e2e2e;
                    color: white;
                    border: 1px solid #444444;
                    padding: 5px 15px;
                }
                QPushButton:hover {
                    background-color: #444444;
                }
            """
        else:
            return ""


def main(initial_expression=None):
    # --- Main Application Entry Point ---
    app = QtWidgets.QApplication(sys.argv)
    window = CalculatorWindow(initial_expression)
    window.show()
    sys.exit(app.exec())
