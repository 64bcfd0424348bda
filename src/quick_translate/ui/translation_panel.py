"""Translation Panel - Text input, language pickers and result display."""

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from quick_translate.core import (
    DEFAULT_SOURCE_LANGUAGE,
    DEFAULT_TARGET_LANGUAGE,
    LANGUAGE_NAMES,
    SUPPORTED_LANGUAGES,
    Failed,
    InFlight,
    RequestState,
    Succeeded,
)


class TranslationPanel(QWidget):
    """Panel that collects the text to translate and renders request state."""

    translate_requested = Signal(str, str, str)  # text, source, target
    cancel_requested = Signal()

    def __init__(
        self,
        source_language: str = DEFAULT_SOURCE_LANGUAGE,
        target_language: str = DEFAULT_TARGET_LANGUAGE,
    ):
        super().__init__()
        self.setWindowTitle("Quick Translate")

        self._busy = False

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(12, 12, 12, 12)
        main_layout.setSpacing(12)

        languages_layout = QHBoxLayout()
        self.source_combo = self._create_language_combo(source_language)
        self.swap_button = QPushButton("⇄")
        self.swap_button.setToolTip("Swap languages")
        self.swap_button.clicked.connect(self.swap_languages)
        self.target_combo = self._create_language_combo(target_language)
        languages_layout.addWidget(self.source_combo)
        languages_layout.addWidget(self.swap_button)
        languages_layout.addWidget(self.target_combo)
        languages_layout.addStretch()
        main_layout.addLayout(languages_layout)

        texts_layout = QHBoxLayout()

        input_layout = QVBoxLayout()
        input_label = QLabel("Enter text to translate:")
        input_label.setStyleSheet("color: gray;")
        self.input_text = QTextEdit()
        self.input_text.setAcceptRichText(False)
        self.input_text.textChanged.connect(self._update_actions)
        input_layout.addWidget(input_label)
        input_layout.addWidget(self.input_text)
        texts_layout.addLayout(input_layout)

        output_layout = QVBoxLayout()
        output_label = QLabel("Translation:")
        output_label.setStyleSheet("color: gray;")
        self.output_text = QTextEdit()
        self.output_text.setReadOnly(True)
        output_layout.addWidget(output_label)
        output_layout.addWidget(self.output_text)
        texts_layout.addLayout(output_layout)

        main_layout.addLayout(texts_layout, 1)

        actions_layout = QHBoxLayout()
        actions_layout.addStretch()
        self.translate_button = QPushButton("Translate")
        self.translate_button.setDefault(True)
        self.translate_button.clicked.connect(self._on_translate_clicked)
        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.cancel_requested.emit)
        actions_layout.addWidget(self.translate_button)
        actions_layout.addWidget(self.cancel_button)
        actions_layout.addStretch()
        main_layout.addLayout(actions_layout)

        self.error_label = QLabel("")
        self.error_label.setStyleSheet("color: red;")
        self.error_label.setWordWrap(True)
        main_layout.addWidget(self.error_label)

        self.resize(600, 300)
        self._update_actions()

    @property
    def source_language(self) -> str:
        return self.source_combo.currentData()

    @property
    def target_language(self) -> str:
        return self.target_combo.currentData()

    def swap_languages(self) -> None:
        """Swap the language pair, and the texts when there is any."""
        source = self.source_language
        target = self.target_language
        self._select_language(self.source_combo, target)
        self._select_language(self.target_combo, source)

        input_text = self.input_text.toPlainText()
        output_text = self.output_text.toPlainText()
        if input_text or output_text:
            self.input_text.setPlainText(output_text)
            self.output_text.setPlainText(input_text)

    def render_state(self, state: RequestState) -> None:
        """Show the controller's current state."""
        self._busy = state.is_busy

        if isinstance(state, InFlight):
            self.error_label.clear()
            self.translate_button.setText("Translating...")
        else:
            self.translate_button.setText("Translate")

        if isinstance(state, Succeeded):
            self.output_text.setPlainText(state.translated_text)
        elif isinstance(state, Failed):
            self.error_label.setText(state.message)

        self._update_actions()

    def _on_translate_clicked(self) -> None:
        text = self.input_text.toPlainText()
        if not text:
            return
        self.translate_requested.emit(text, self.source_language, self.target_language)

    def _update_actions(self) -> None:
        has_text = bool(self.input_text.toPlainText())
        self.translate_button.setEnabled(has_text and not self._busy)
        self.cancel_button.setEnabled(self._busy)

    @staticmethod
    def _create_language_combo(selected: str) -> QComboBox:
        combo = QComboBox()
        for code in sorted(SUPPORTED_LANGUAGES):
            combo.addItem(LANGUAGE_NAMES.get(code, code.upper()), code)
        TranslationPanel._select_language(combo, selected)
        combo.setFixedWidth(150)
        return combo

    @staticmethod
    def _select_language(combo: QComboBox, code: str) -> None:
        index = combo.findData(code)
        if index >= 0:
            combo.setCurrentIndex(index)
