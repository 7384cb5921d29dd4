"""Flask front end for the question/answer matcher."""
