"""Pytest configuration and fixtures."""
import textwrap

import pytest

SAMPLE_SOURCES = {
    "src/App.tsx": """
        import { useState } from 'react';
        import Header from './components/Header';
        import { Footer } from './components/Footer';

        export default function App() {
          const [user, setUser] = useState(null);
          return (
            <div className="app">
              <Header user={user} onLogout={() => setUser(null)} />
              <Footer year={2024} className="footer" />
            </div>
          );
        }
    """,
    "src/components/Header.tsx": """
        import { useAuth } from '../hooks/useAuth';

        interface HeaderProps { user: string | null; onLogout: () => void; }

        export const Header = ({ user, onLogout }: HeaderProps) => {
          const { isAdmin } = useAuth(user);
          return (
            <header>
              <span>{user}</span>
              {isAdmin && <button onClick={onLogout}>Log out</button>}
            </header>
          );
        };

        export default Header;
    """,
    "src/components/Footer.tsx": """
        export function Footer({ year }: { year: number }) {
          return <footer>{year}</footer>;
        }
    """,
    "src/hooks/useAuth.ts": """
        import { useEffect, useState } from 'react';
        import { fetchSession } from '@/lib/api';

        export function useAuth(user: string | null) {
          const [isAdmin, setIsAdmin] = useState(false);
          useEffect(() => {
            fetchSession(user).then((session) => setIsAdmin(session.admin));
          }, [user]);
          return { isAdmin };
        }
    """,
    "src/lib/api.ts": """
        const BASE_URL = '/api';

        export async function fetchSession(user: string | null) {
          const response = await fetch(`${BASE_URL}/session?user=${user}`);
          return response.json();
        }

        export const formatUser = (name: string) => name.trim();
    """,
}


def make_record(path: str, content: str) -> dict:
    return {"path": path, "name": path.rsplit("/", 1)[-1], "content": textwrap.dedent(content)}


@pytest.fixture
def sample_records():
    """Five-file app: App renders Header and Footer, Header uses a hook, the hook uses an API util."""
    return [make_record(path, content) for path, content in SAMPLE_SOURCES.items()]


@pytest.fixture
def write_project(tmp_path):
    """Write {relative path: text} into a temporary project root and return it."""

    def _write(sources: dict[str, str]):
        for rel_path, content in sources.items():
            target = tmp_path / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(textwrap.dedent(content), encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def sample_project(write_project):
    """The five-file sample app on disk."""
    return write_project(SAMPLE_SOURCES)
