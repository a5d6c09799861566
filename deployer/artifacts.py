"""
Hardhat artifact loading and library linking
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from eth_utils import is_address, to_normalized_address

from deployer.errors import ArtifactNotFoundError, LibraryLinkingError, NoBytecodeError

logger = logging.getLogger(__name__)


@dataclass
class Artifact:
    contract_name: str
    source_name: str
    abi: List[Dict]
    bytecode: str
    link_references: Dict[str, Dict[str, List[Dict]]] = field(default_factory=dict)

    @property
    def fully_qualified_name(self) -> str:
        return f"{self.source_name}:{self.contract_name}"

    @classmethod
    def from_json(cls, data: Dict) -> "Artifact":
        return cls(
            contract_name=data["contractName"],
            source_name=data.get("sourceName", ""),
            abi=data.get("abi", []),
            bytecode=data.get("bytecode", "0x"),
            link_references=data.get("linkReferences") or {},
        )


def _artifact_files(root: Path) -> List[Path]:
    return [
        path for path in root.rglob("*.json")
        if not path.name.endswith(".dbg.json") and "build-info" not in path.parts
    ]


def read_artifact(name: str, artifacts_dir: str = "artifacts") -> Artifact:
    """Read an artifact by contract name or by fully qualified name (source:Contract)"""
    root = Path(artifacts_dir)
    if not root.is_dir():
        raise ArtifactNotFoundError(
            f"Artifacts directory {root} not found. Compile the contracts first"
        )

    if ":" in name:
        source_name, contract_name = name.rsplit(":", 1)
        path = root / source_name / f"{contract_name}.json"
        if not path.is_file():
            raise ArtifactNotFoundError(f"Artifact for contract \"{name}\" not found")
        candidates = [path]
    else:
        candidates = [path for path in _artifact_files(root) if path.stem == name]
        if not candidates:
            raise ArtifactNotFoundError(f"Artifact for contract \"{name}\" not found")
        if len(candidates) > 1:
            qualified = sorted(
                f"{path.parent.relative_to(root).as_posix()}:{name}" for path in candidates
            )
            raise ArtifactNotFoundError(
                f"There are multiple artifacts for contract \"{name}\", please use a "
                f"fully qualified name instead: {', '.join(qualified)}"
            )

    with open(candidates[0], "r") as f:
        artifact = Artifact.from_json(json.load(f))
    logger.debug(f"Loaded artifact {artifact.fully_qualified_name} from {candidates[0]}")
    return artifact


def _needed_libraries(artifact: Artifact) -> List[Tuple[str, str]]:
    return [
        (source_name, library_name)
        for source_name, libraries in artifact.link_references.items()
        for library_name in libraries
    ]


def _resolve_library(artifact: Artifact, key: str) -> Tuple[str, str]:
    needed = _needed_libraries(artifact)
    if ":" in key:
        source_name, library_name = key.rsplit(":", 1)
        matches = [lib for lib in needed if lib == (source_name, library_name)]
    else:
        matches = [lib for lib in needed if lib[1] == key]

    if not matches:
        raise LibraryLinkingError(
            f"You tried to link contract {artifact.contract_name} with library {key}, "
            f"which isn't one of its libraries"
        )
    if len(matches) > 1:
        qualified = ", ".join(f"{source}:{lib}" for source, lib in matches)
        raise LibraryLinkingError(
            f"The library name {key} is ambiguous for the contract "
            f"{artifact.contract_name}. It may resolve to one of: {qualified}. "
            f"Use the fully qualified name instead"
        )
    return matches[0]


def link_bytecode(artifact: Artifact, libraries: Optional[Dict[str, str]] = None) -> str:
    """Return the artifact bytecode with every library address written in"""
    if not artifact.bytecode or artifact.bytecode == "0x":
        raise NoBytecodeError(
            f"You are trying to create a contract factory for the contract "
            f"{artifact.contract_name}, which is abstract and can't be deployed"
        )

    linked: Dict[Tuple[str, str], str] = {}
    for key, address in (libraries or {}).items():
        if not is_address(address):
            raise LibraryLinkingError(
                f"You tried to link contract {artifact.contract_name} with library "
                f"{key} using an invalid address: {address}"
            )
        library = _resolve_library(artifact, key)
        if library in linked:
            raise LibraryLinkingError(
                f"The library {library[0]}:{library[1]} is provided more than once"
            )
        linked[library] = address

    missing = [lib for lib in _needed_libraries(artifact) if lib not in linked]
    if missing:
        names = ", ".join(f"{source}:{lib}" for source, lib in missing)
        raise LibraryLinkingError(
            f"The contract {artifact.contract_name} is missing links for the "
            f"following libraries: {names}"
        )

    code = artifact.bytecode[2:] if artifact.bytecode.startswith("0x") else artifact.bytecode
    for (source_name, library_name), address in linked.items():
        address_hex = to_normalized_address(address)[2:]
        for ref in artifact.link_references[source_name][library_name]:
            # offsets are in bytes, the code is hex
            start = ref["start"] * 2
            end = start + ref["length"] * 2
            code = code[:start] + address_hex + code[end:]
        logger.debug(f"Linked {source_name}:{library_name} at {address}")

    return "0x" + code
