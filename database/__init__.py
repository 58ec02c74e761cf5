"""Users table access on DynamoDB."""
