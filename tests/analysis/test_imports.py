"""Tests for local import extraction."""

import pytest

from componentgraph.analysis.imports import extract_imports, is_local_specifier


def test_named_imports_with_alias():
    text = "import { Button, Card as Tile } from './ui';"
    assert extract_imports(text) == ["Button", "Card"]


def test_default_import_from_alias_root():
    assert extract_imports("import Modal from '@/components/Modal';") == ["Modal"]


def test_mixed_default_and_named():
    text = "import Modal, { ModalProps } from '@/components/Modal';"
    assert extract_imports(text) == ["Modal", "ModalProps"]


def test_package_imports_are_discarded():
    text = (
        "import React, { useState } from 'react';\n"
        "import { clsx } from 'clsx';\n"
        "import Header from '../Header';\n"
    )
    assert extract_imports(text) == ["Header"]


def test_type_only_imports():
    text = (
        "import type { Props } from './types';\n"
        "import { type Theme, Button } from './theme';\n"
    )
    assert extract_imports(text) == ["Props", "Theme", "Button"]


def test_order_of_appearance_and_duplicates_kept():
    text = (
        "import { Beta } from './beta';\n"
        "import Alpha from './alpha';\n"
        "import { Beta } from './beta-again';\n"
    )
    assert extract_imports(text) == ["Beta", "Alpha", "Beta"]


def test_trailing_comma_and_multiline_list():
    text = "import {\n  One,\n  Two,\n} from './numbers';"
    assert extract_imports(text) == ["One", "Two"]


def test_side_effect_namespace_and_dynamic_imports_ignored():
    text = (
        "import './styles.css';\n"
        "import * as utils from './utils';\n"
        "const Lazy = import('./Lazy');\n"
    )
    assert extract_imports(text) == []


def test_commented_import_ignored():
    text = "// import { Ghost } from './ghost';\nimport { Real } from './real';"
    assert extract_imports(text) == ["Real"]


def test_custom_local_prefixes():
    text = "import { Nav } from '~/nav';\nimport { Side } from './side';"
    assert extract_imports(text, local_prefixes=("~/",)) == ["Nav"]


def test_is_local_specifier():
    assert is_local_specifier("./a")
    assert is_local_specifier("../b")
    assert is_local_specifier("@/c")
    assert not is_local_specifier("@scope/pkg")
    assert not is_local_specifier("react")


@pytest.mark.parametrize("text,expected", [
    ("import api from './api';", []),
    ("import api, { fetchUser } from './api';", ["fetchUser"]),
    ("import type config from './config';", []),
    ("import Api from './api';", ["Api"]),
])
def test_default_import_requires_uppercase_name(text, expected):
    assert extract_imports(text) == expected
