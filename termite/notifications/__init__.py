"""New-mail notifications: desktop, terminal bell, tmux title and status file."""