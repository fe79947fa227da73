# Copyright © SixtyFPS GmbH <info@slint.dev>
# SPDX-License-Identifier: GPL-3.0-only OR LicenseRef-Slint-Royalty-free-2.0 OR LicenseRef-Slint-Software-3.0

import nox

@nox.session(python="3.10")
def python(session: nox.Session):
    session.install("-e", ".[dev]")
    session.run("pytest", "-s")
