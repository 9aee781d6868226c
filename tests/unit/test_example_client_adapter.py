from assignment_analysis.analysis.example_client_adapter import ExampleClientAdapter
from assignment_analysis.analysis.parser import parse_analysis


class TestExampleClientAdapter:
    def test_default_response_has_all_labels(self) -> None:
        text = ExampleClientAdapter().create_chat_completion(
            model="example", temperature=0.0, max_tokens=10, user_prompt="anything"
        )
        fields = parse_analysis(text)
        assert fields is not None
        assert len(fields.to_payload()) == 4

    def test_returns_custom_response(self) -> None:
        adapter = ExampleClientAdapter(response="Confidence Level: Low")
        text = adapter.create_chat_completion(
            model="example", temperature=0.0, max_tokens=10, user_prompt="anything"
        )
        assert text == "Confidence Level: Low"
