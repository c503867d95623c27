from app.exceptions.custom import CredentialsError
from app.mappers.document import RequestDocument
from app.schemas.booking import Credentials

PARAMETER_PATH = "Configuration/Parameters/Parameter"


def extract_credentials(document: RequestDocument) -> Credentials:
    """Read partner credentials from the first ``Parameter`` node."""
    node = document.first(PARAMETER_PATH)
    if node is None:
        raise CredentialsError("Missing required parameters")

    username = (node.get("username") or "").strip()
    if not username:
        raise CredentialsError("Username is missing or empty")

    password = node.get("password") or ""
    if not password:
        raise CredentialsError("Password is missing or empty")

    company_id = (node.get("CompanyID") or "").strip()
    if not (company_id.isascii() and company_id.isdigit()) or int(company_id) == 0:
        raise CredentialsError("Company ID is missing, empty or non-numeric")

    return Credentials(username=username, password=password, company_id=int(company_id))
