# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Fly API Client Authors
#

from pydantic import Field

from ..models import FlyModel, GraphQLInput, NodeList


class LoggedCertificate(FlyModel):
    """A certificate recorded in an organization's SSH certificate log."""

    root: bool = Field(..., description="Whether this is the organization's root CA")
    cert: str = Field(..., description="Certificate in OpenSSH format")


class SSHCertificate(FlyModel):
    """The organization's SSH CA certificate."""

    certificate: str


class IssuedCertificate(FlyModel):
    """A user certificate with its private key."""

    certificate: str
    key: str | None = None


class EstablishSSHKeyInput(GraphQLInput):
    organization_id: str = Field(..., min_length=1)
    override: bool = False


class IssueCertificateInput(GraphQLInput):
    """Input for issuing an SSH user certificate."""

    organization_id: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    username: str | None = Field(None, description="Principal to issue for; omitted when None")
    valid_hours: int | None = Field(None, ge=1, description="Certificate lifetime in hours")


# Operation results


class _OrganizationCertificates(FlyModel):
    logged_certificates: NodeList[LoggedCertificate] = Field(default_factory=list)


class LoggedCertificatesQuery(FlyModel):
    organization: _OrganizationCertificates | None = None


class EstablishSSHKeyMutation(FlyModel):
    establish_ssh_key: SSHCertificate = Field(..., alias="establishSshKey")


class IssueCertificateMutation(FlyModel):
    issue_certificate: IssuedCertificate
