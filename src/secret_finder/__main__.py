# SPDX-FileCopyrightText: 2025 Secret Finder contributors
# SPDX-License-Identifier: MIT

from .cli import main

main(prog_name="secret-finder")
