import pytest

from release_notes_collector.models import Commit


@pytest.fixture
def merge_commit():
	return Commit(
		sha="973dcd0c1a2555a6726aed8248ca816c9771253f",
		message="Merge pull request #76030 from andrewsykim/e2e-legacyscheme\n\n"
		"    test/e2e: replace legacy scheme with client-go scheme",
		author="k8s-ci-robot",
	)


@pytest.fixture
def squash_commit():
	return Commit(
		sha="27e5971c11cfcda703a39ed670a565f0f3564713",
		message="Add swapoff to centos so kubelet starts (#504)",
		author="neolit123",
	)
