from mangum import Mangum
from main import app

# AWS Lambda entrypoint for API Gateway. Responses are plain JSON, so the
# buffered proxy integration is sufficient.
handler = Mangum(app)
