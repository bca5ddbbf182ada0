"""
Tests for the public feed and search filter.
"""
from datetime import timedelta

from django.utils import timezone

from src.apps.certificates.selectors import filter_certificates, list_public_certificates


class TestPublicFeed:
    """Public certificate listing"""

    def test_only_public_certificates_newest_first(self, make_certificate):
        now = timezone.now()
        older = make_certificate(title="Older", created_at=now - timedelta(days=2))
        make_certificate(title="Hidden", is_public=False, created_at=now - timedelta(days=1))
        newer = make_certificate(title="Newer", created_at=now)

        assert list(list_public_certificates()) == [newer, older]


class TestFilterCertificates:
    """Case-insensitive search over title, issuer and owner"""

    def test_aws_query(self, make_certificate, other_profile):
        aws_title = make_certificate(title="AWS Solutions Architect", issuer="Amazon")
        aws_issuer = make_certificate(title="Cloud Practitioner", issuer="aws training")
        make_certificate(title="Kubernetes Admin", issuer="CNCF")
        make_certificate(title="Terraform Associate", issuer="HashiCorp", owner=other_profile)

        found = filter_certificates(list_public_certificates(), "aws")

        assert {c.id for c in found} == {aws_title.id, aws_issuer.id}

    def test_matches_owner_username_and_display_name(self, make_certificate, other_profile):
        mine = make_certificate(title="Scrum Master")
        bobs = make_certificate(title="Scrum Master", owner=other_profile)

        assert filter_certificates(list_public_certificates(), "ALICE") == [mine]
        assert filter_certificates(list_public_certificates(), "jones") == [bobs]

    def test_empty_query_keeps_everything(self, make_certificate):
        make_certificate(title="One")
        make_certificate(title="Two")

        assert len(filter_certificates(list_public_certificates(), "")) == 2
        assert len(filter_certificates(list_public_certificates(), None)) == 2

    def test_no_match(self, make_certificate):
        make_certificate(title="One")

        assert filter_certificates(list_public_certificates(), "zzz") == []

    def test_aws_does_not_match_amazon_web_services_alone(self, make_certificate):
        make_certificate(title="Certified Solutions Architect", issuer="Amazon Web Services")

        assert filter_certificates(list_public_certificates(), "aws") == []
        assert len(filter_certificates(list_public_certificates(), "amazon web")) == 1
