"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and provides a factory for throwaway Unity project trees.
"""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of unity_indexer modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("unity_indexer"):
        del sys.modules[module_name]


PLAYER_SCRIPT = """\
using UnityEngine;

namespace Game.Player
{
    public class PlayerController : MonoBehaviour
    {
        [SerializeField] private float speed = 5f;

        void Update()
        {
            MovePlayer();
        }

        /// <summary>
        /// Moves the player.
        /// </summary>
        void MovePlayer()
        {
        }
    }
}
"""

ENEMY_SCRIPT = """\
using System.Collections;
using UnityEngine;

public class EnemyAI : MonoBehaviour
{
    // Fades the enemy out
    IEnumerator DoFade()
    {
        yield return null;
    }

    [ContextMenu("Attack")]
    public void Attack() { }
}
"""


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[[dict[str, str | bytes]], Path]:
    """Build a project root holding the given files under Assets/.

    Keys are paths relative to Assets/, values are file contents.
    """

    def _make(files: dict[str, str | bytes]) -> Path:
        root = tmp_path / "MyGame"
        assets = root / "Assets"
        assets.mkdir(parents=True, exist_ok=True)
        for rel, content in files.items():
            path = assets / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def sample_project(make_project: Callable[[dict[str, str | bytes]], Path]) -> Path:
    """A small project with a player script and an enemy script."""
    return make_project(
        {
            "Scripts/Player/PlayerController.cs": PLAYER_SCRIPT,
            "Scripts/Player/PlayerController.cs.meta": "fileFormatVersion: 2\n",
            "AI/EnemyAI.cs": ENEMY_SCRIPT,
        }
    )


@pytest.fixture
def player_script() -> str:
    return PLAYER_SCRIPT


@pytest.fixture
def enemy_script() -> str:
    return ENEMY_SCRIPT
