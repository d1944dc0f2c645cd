"""Shared pytest fixtures for the FHEVM example kit test suite.

Provides reusable fixtures for:
- Sample Solidity contracts and TypeScript tests
- A temporary project root laid out like the example repository
- A temporary Hardhat template containing build output to exclude
- Settings pointing at those temporary trees
- Ad-hoc example descriptors
"""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any, Callable

import pytest

from fhevm_examples.catalog import ExampleDescriptor
from fhevm_examples.config import Settings


# ---------------------------------------------------------------------------
# Sample sources
# ---------------------------------------------------------------------------

COUNTER_SOL = textwrap.dedent(
    """\
    // SPDX-License-Identifier: BSD-3-Clause-Clear
    pragma solidity ^0.8.24;

    import { FHE, euint32, externalEuint32 } from "@fhevm/solidity/lib/FHE.sol";
    import { SepoliaConfig } from "@fhevm/solidity/config/ZamaConfig.sol";

    /**
     * A simple FHE counter contract
     */
    contract FHECounter is SepoliaConfig {
        euint32 private _count;

        function increment(externalEuint32 inputEuint32, bytes calldata inputProof) external {
            euint32 encryptedEuint32 = FHE.fromExternal(inputEuint32, inputProof);
            _count = FHE.add(_count, encryptedEuint32);
            FHE.allowThis(_count);
            FHE.allow(_count, msg.sender);
        }
    }
    """
)

PREDICTION_SOL = textwrap.dedent(
    """\
    // SPDX-License-Identifier: MIT
    pragma solidity ^0.8.24;

    /// @notice Confidential predictions on future events
    contract PrivacyGuess {
        struct Event { string title; bool finalized; }
        mapping(uint256 => Event) public events;
    }
    """
)

COUNTER_TEST_TS = textwrap.dedent(
    """\
    import { ethers, fhevm } from "hardhat";
    import { expect } from "chai";

    describe("FHECounter", function () {
      it("encrypted count should be uninitialized after deployment", async function () {
        expect(1).to.eq(1);
      });
    });
    """
)


@pytest.fixture
def counter_sol() -> str:
    return COUNTER_SOL


@pytest.fixture
def prediction_sol() -> str:
    return PREDICTION_SOL


@pytest.fixture
def counter_test_ts() -> str:
    return COUNTER_TEST_TS


# ---------------------------------------------------------------------------
# Temporary trees
# ---------------------------------------------------------------------------

@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Project root with contracts and tests for a few catalog examples.

    ``contracts/PrivacyGuessFHESimple.sol`` is present but its test is not, so
    the optional-companion path can be exercised.
    """
    root = tmp_path / "project"
    (root / "contracts").mkdir(parents=True)
    (root / "test").mkdir()

    (root / "contracts" / "FHECounter.sol").write_text(COUNTER_SOL, encoding="utf-8")
    (root / "test" / "Counter.ts").write_text(COUNTER_TEST_TS, encoding="utf-8")
    (root / "contracts" / "PrivacyGuess.sol").write_text(PREDICTION_SOL, encoding="utf-8")
    (root / "test" / "PrivacyGuess.ts").write_text(COUNTER_TEST_TS, encoding="utf-8")
    (root / "contracts" / "PrivacyGuessFHESimple.sol").write_text(
        PREDICTION_SOL.replace("contract PrivacyGuess {", "contract PrivacyGuessFHESimple {"),
        encoding="utf-8",
    )
    yield root


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A miniature Hardhat template with build output that must be skipped."""
    tpl = tmp_path / "fhevm-hardhat-template-main"
    (tpl / "contracts").mkdir(parents=True)
    (tpl / "test").mkdir()
    (tpl / "deploy").mkdir()
    (tpl / "node_modules" / "hardhat").mkdir(parents=True)
    (tpl / "artifacts" / "build-info").mkdir(parents=True)
    (tpl / "cache").mkdir()

    (tpl / "hardhat.config.ts").write_text("export default {};\n", encoding="utf-8")
    (tpl / "package.json").write_text('{"name": "template"}\n', encoding="utf-8")
    (tpl / "contracts" / "FHECounter.sol").write_text(COUNTER_SOL, encoding="utf-8")
    (tpl / "deploy" / "deploy.ts").write_bytes(b"// deploy\r\n\x00binary-ish\n")
    (tpl / "node_modules" / "hardhat" / "index.js").write_text("x", encoding="utf-8")
    (tpl / "artifacts" / "build-info" / "a.json").write_text("{}", encoding="utf-8")
    (tpl / "cache" / "solidity-files-cache.json").write_text("{}", encoding="utf-8")
    yield tpl


@pytest.fixture
def settings(project_root: Path, template_dir: Path, tmp_path: Path) -> Settings:
    return Settings(
        root_dir=project_root,
        template_dir=template_dir,
        output_root=tmp_path / "output",
    )


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------

@pytest.fixture
def make_example() -> Callable[..., ExampleDescriptor]:
    """Factory for ad-hoc descriptors that are not in the catalog."""

    def _make(identifier: str = "x", **overrides: Any) -> ExampleDescriptor:
        fields: dict[str, Any] = {
            "identifier": identifier,
            "title": identifier.upper(),
            "description": f"Description of {identifier}",
            "category": "Basics",
            "contract": f"contracts/{identifier}.sol",
            "test": f"test/{identifier}.ts",
        }
        fields.update(overrides)
        return ExampleDescriptor(**fields)

    return _make
