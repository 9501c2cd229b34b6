"""Registry locations and marker values."""

UNINSTALL_ROOTS = (
    r"HKLM\SOFTWARE\Microsoft\Windows\CurrentVersion\Uninstall",
    r"HKLM\SOFTWARE\WOW6432Node\Microsoft\Windows\CurrentVersion\Uninstall",
)

# Per-user layer flags; writable without elevation.
COMPAT_FLAGS_KEY = r"HKCU\Software\Microsoft\Windows NT\CurrentVersion\AppCompatFlags\Layers"

DISPLAY_NAME_VALUE = "DisplayName"
DISPLAY_ICON_VALUE = "DisplayIcon"

RUN_AS_INVOKER_MARKER = "RunAsInvoker"
RUN_AS_INVOKER_DATA = "~ RunAsInvoker"

DEFAULT_TARGET_DISPLAY_NAME = "Daum게임 스타터"
DEFAULT_INVALID_CHOICE_DELAY = 1.0
