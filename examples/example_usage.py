"""Example: drive the attendance view directly (without Flask).

Controllers are a thin layer; the view controller holds the logic.
"""

import importlib

from config import get_settings_module

from src.class_attendance.class_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(api_config=settings.API_CONFIG)
    view = container.attendance_view
    view.mount()
    if view.classes:
        view.set_class(view.classes[0].id)
    print([s.name for s in view.unmarked])
    for n in container.notifier.drain():
        print(n)


if __name__ == "__main__":
    main()
