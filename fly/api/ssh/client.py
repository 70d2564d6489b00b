from pydantic import validate_call

from ..errors import NotFoundError
from ..graphql.client import GraphQLClient
from ..models import NonEmptyStr
from .models import (
    EstablishSSHKeyInput,
    EstablishSSHKeyMutation,
    IssueCertificateInput,
    IssueCertificateMutation,
    IssuedCertificate,
    LoggedCertificate,
    LoggedCertificatesQuery,
    SSHCertificate,
)


class SSHClient:
    """Operations on an organization's SSH certificate authority."""

    def __init__(self, graphql: GraphQLClient):
        self.graphql = graphql

    @validate_call
    async def get_logged_certificates(
        self, organization_slug: NonEmptyStr
    ) -> list[LoggedCertificate]:
        """List certificates in an organization's certificate log."""
        result = await self.graphql.execute(
            self.Q_LOGGED_CERTIFICATES, {"slug": organization_slug}, LoggedCertificatesQuery
        )
        if result.organization is None:
            raise NotFoundError(f"Organization {organization_slug} not found")
        return result.organization.logged_certificates

    Q_LOGGED_CERTIFICATES = """
        query ($slug: String!) {
            organization(slug: $slug) {
                loggedCertificates {
                    nodes {
                        root
                        cert
                    }
                }
            }
        }
    """

    @validate_call
    async def establish_ssh_key(
        self, organization_id: NonEmptyStr, override: bool = False
    ) -> SSHCertificate:
        """
        Create the organization's SSH CA key.

        Args:
            organization_id: ID of the organization
            override: Replace an existing key

        Returns:
            The CA certificate
        """
        key_input = EstablishSSHKeyInput(organization_id=organization_id, override=override)
        result = await self.graphql.execute(
            self.Q_ESTABLISH_SSH_KEY, {"input": key_input.for_graphql()}, EstablishSSHKeyMutation
        )
        return result.establish_ssh_key

    Q_ESTABLISH_SSH_KEY = """
        mutation ($input: EstablishSSHKeyInput!) {
            establishSshKey(input: $input) {
                certificate
            }
        }
    """

    @validate_call
    async def issue_ssh_certificate(
        self,
        organization_id: NonEmptyStr,
        email: NonEmptyStr,
        username: str | None = None,
        valid_hours: int | None = None,
    ) -> IssuedCertificate:
        """
        Issue a user certificate signed by the organization's CA.

        Args:
            organization_id: ID of the organization
            email: Email of the user the certificate is for
            username: Principal to issue for; the server default when omitted
            valid_hours: Lifetime of the certificate; the server default when omitted

        Returns:
            The certificate and its private key
        """
        cert_input = IssueCertificateInput(
            organization_id=organization_id,
            email=email,
            username=username,
            valid_hours=valid_hours,
        )
        result = await self.graphql.execute(
            self.Q_ISSUE_CERTIFICATE,
            {"input": cert_input.for_graphql()},
            IssueCertificateMutation,
        )
        return result.issue_certificate

    Q_ISSUE_CERTIFICATE = """
        mutation ($input: IssueCertificateInput!) {
            issueCertificate(input: $input) {
                certificate
                key
            }
        }
    """
