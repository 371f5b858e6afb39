"""Package entry point for ``python -m html_obfuscator``.

WHY: Users run the obfuscator as ``python -m html_obfuscator page.html``
for CLI mode, or ``python -m html_obfuscator --gui`` for the desktop GUI.

HOW: Checks sys.argv for the ``--gui`` flag. If present, launches the
Tkinter GUI. Otherwise, delegates to the CLI's main() function.
"""

import sys

if __name__ == "__main__":
    if "--gui" in sys.argv:
        from html_obfuscator.gui import main as gui_main
        gui_main()
    else:
        from html_obfuscator.cli import main
        main()
