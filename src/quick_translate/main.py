"""Main entry point for the quick translate application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from quick_translate.coordinators import TranslationRequestController
from quick_translate.services import MyMemoryTranslationService, SettingsManager
from quick_translate.ui import TranslationPanel


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Quick Translate")
    app.setOrganizationName("QuickTranslate")

    # 2. Initialize Infrastructure
    settings = SettingsManager()
    logging.basicConfig(
        level=getattr(logging, settings.get_log_level(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    translation_service = MyMemoryTranslationService(
        endpoint=settings.get_endpoint(),
        timeout=settings.get_timeout(),
        contact_email=settings.get_contact_email(),
        api_key=settings.get_api_key(),
    )

    # 3. Construct UI
    source_language, target_language = settings.get_default_languages()
    panel = TranslationPanel(source_language=source_language, target_language=target_language)

    # 4. Instantiate Coordinator (Dependency Injection)
    controller = TranslationRequestController(translation_service=translation_service)

    # 5. Signal Wiring (Connect UI signals to Controller slots)
    panel.translate_requested.connect(controller.submit)
    panel.cancel_requested.connect(controller.cancel)
    controller.state_changed.connect(panel.render_state)

    # 6. Show UI and start event loop
    panel.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
