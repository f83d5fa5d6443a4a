from cloudwire import universal_factory


def main():
    # Example usage of the universal factory
    config = {
        "aws_access_key_id": "AKIAEXAMPLE",
        "aws_secret_access_key": "wJalrXUtnFEMI/K7MDENG/bPxRfiCYEXAMPLEKEY",
        "region_name": "us-west-1",
    }

    dynamodb = universal_factory("dynamodb", config)
    sqs = universal_factory("sqs", config)

    print(f"DynamoDB endpoint: {dynamodb.endpoint_for(dynamodb.region)}")
    print(f"SQS endpoint: {sqs.endpoint_for(sqs.region)}")


if __name__ == "__main__":
    main()
