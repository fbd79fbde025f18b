"""Path tracking with pure pursuit and a vector PID controller."""